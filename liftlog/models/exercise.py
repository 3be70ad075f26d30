from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Text, Boolean, DateTime, func, true
from liftlog.db import Base

class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)
    gif_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    uses_weight: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # the database removes these rows when an exercise is deleted
    plan_entries = relationship(
        "PlanExercise", back_populates="exercise", cascade="all", passive_deletes=True
    )
    sets = relationship(
        "WorkoutSet", back_populates="exercise", cascade="all", passive_deletes=True
    )
