import datetime as dt
from typing import Optional

from sqlalchemy import CheckConstraint, Date, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from habitgrid.models.base import Base

RECORD_STATUSES = ("completed", "missed", "skipped", "none")


class Record(Base):
    __tablename__ = "records"
    __table_args__ = (
        Index("idx_records_habit_date", "habit_id", "date", unique=True),
        CheckConstraint("status IN ('completed', 'missed', 'skipped', 'none')", name="ck_records_status"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    habit_id: Mapped[int] = mapped_column(ForeignKey("habits.id", ondelete="CASCADE"), index=True)
    # "date" shadows the stdlib name inside the class body
    date: Mapped[dt.date] = mapped_column(Date, index=True)
    status: Mapped[str] = mapped_column(String(16))
    value: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
