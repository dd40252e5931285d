from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from habitgrid.models.base import Base

HABIT_TYPES = ("boolean", "numeric")


class Habit(Base):
    __tablename__ = "habits"
    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="ck_habits_name_not_empty"),
        CheckConstraint("type IN ('boolean', 'numeric')", name="ck_habits_type"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    type: Mapped[str] = mapped_column(String(16))
    color: Mapped[str] = mapped_column(String(32))
    target_value: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, server_default=func.now(), index=True)

