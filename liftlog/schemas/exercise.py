from typing import Annotated
from datetime import datetime
from pydantic import StringConstraints, TypeAdapter, HttpUrl, ValidationError, field_validator
from liftlog.schemas.common import CamelModel, NameStr, reject_null

InstructionsStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
UrlStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

_http_url = TypeAdapter(HttpUrl)

def _clean_gif_url(v: str | None) -> str | None:
    # "" clears the link; anything else must be an http(s) URL, stored as typed
    if not v:
        return None
    try:
        _http_url.validate_python(v)
    except ValidationError:
        raise ValueError("gifUrl must be a valid http(s) URL")
    return v

class ExerciseCreate(CamelModel):
    name: NameStr
    instructions: InstructionsStr
    gif_url: UrlStr | None = None
    uses_weight: bool = True

    @field_validator("gif_url")
    @classmethod
    def gif_url_valid(cls, v: str | None) -> str | None:
        return _clean_gif_url(v)

class ExerciseUpdate(CamelModel):
    name: NameStr | None = None
    instructions: InstructionsStr | None = None
    gif_url: UrlStr | None = None
    uses_weight: bool | None = None

    @field_validator("name", "instructions", "uses_weight")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)

    @field_validator("gif_url")
    @classmethod
    def gif_url_valid(cls, v: str | None) -> str | None:
        return _clean_gif_url(v)

class ExerciseRead(CamelModel):
    id: int
    name: str
    instructions: str
    gif_url: str | None = None
    uses_weight: bool
    created_at: datetime
    updated_at: datetime
