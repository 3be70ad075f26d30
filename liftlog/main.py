# liftlog/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.workout_plans import router as workout_plans_router
from liftlog.routers.workouts import router as workouts_router
from liftlog.settings import get_settings
from liftlog.db import SessionLocal  # for healthz DB check

log = logging.getLogger("uvicorn")
settings = get_settings()

API_PREFIX = "/api"

app = FastAPI(
    title="Liftlog API",
    docs_url=f"{API_PREFIX}/docs",
    openapi_url=f"{API_PREFIX}/openapi.json",
    openapi_tags=[
        {"name": "exercises", "description": "Exercise catalog"},
        {"name": "workout-plans", "description": "Reusable, ordered workout plans"},
        {"name": "workouts", "description": "Logged workout sessions and last-weights lookup"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

def _summarize(errors) -> str:
    parts = []
    for err in errors:
        # drop the leading "body"/"query" segment
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    log.info("validation failed %s %s: %s", request.method, request.url.path, _summarize(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _summarize(errors), "detail": jsonable_encoder(errors)},
    )

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.error("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )

@app.get("/")
def root():
    return {"ok": True, "name": "Liftlog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        log.warning("healthz: database check failed: %s", e)
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(exercises_router, prefix=API_PREFIX)
app.include_router(workout_plans_router, prefix=API_PREFIX)
app.include_router(workouts_router, prefix=API_PREFIX)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("liftlog.main:app", host="127.0.0.1", port=8000, log_level="debug", reload=True)
