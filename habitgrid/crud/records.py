import logging
from datetime import date
from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from habitgrid.models import Record

logger = logging.getLogger(__name__)


def get_records(db: Session, start: date, end: date) -> list[Record]:
    return list(
        db.scalars(
            select(Record)
            .where(and_(Record.date >= start, Record.date <= end))
            .order_by(Record.date, Record.habit_id)
        )
    )


def get_all_records(db: Session) -> list[Record]:
    return list(db.scalars(select(Record).order_by(Record.date, Record.habit_id)))


def get_habit_records(db: Session, habit_id: int) -> list[Record]:
    return list(db.scalars(select(Record).where(Record.habit_id == habit_id).order_by(Record.date)))


def upsert_record(db: Session, habit_id: int, day: date, status: str, value: Optional[float] = None) -> None:
    stmt = sqlite_insert(Record).values(habit_id=habit_id, date=day, status=status, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Record.habit_id, Record.date],
        set_={"status": stmt.excluded.status, "value": stmt.excluded.value},
    )
    db.execute(stmt)
    db.commit()
    logger.info("Upserted record habit=%s date=%s status=%s", habit_id, day.isoformat(), status)
