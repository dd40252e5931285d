import logging
import sqlite3
from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError, StatementError
from sqlalchemy.orm import Session

from habitgrid import crud
from habitgrid.calendar import DayLike, parse_day
from habitgrid.db import create_store_engine, make_session_factory
from habitgrid.errors import ConstraintError, HabitNotFound, StorageUnavailable, StoreError, ValidationError
from habitgrid.models import HABIT_TYPES, RECORD_STATUSES, Base
from habitgrid.schemas import HabitOut, RecordOut

logger = logging.getLogger(__name__)


class HabitStore:
    """Durable CRUD for habits and their daily records.

    Each call runs in its own short-lived session. Constraint violations from
    SQLite come back as ``ConstraintError``; nothing is retried.

    With ``strict=True`` updating or deleting an unknown habit raises
    ``HabitNotFound`` instead of silently doing nothing.
    """

    def __init__(self, engine: Engine, strict: bool = False) -> None:
        self.engine = engine
        self.strict = strict
        self._session_factory = make_session_factory(engine)

    @classmethod
    def open(cls, database_url: str, echo: bool = False, strict: bool = False) -> "HabitStore":
        """Create the engine and the schema, or fail with ``StorageUnavailable``."""
        try:
            engine = create_store_engine(database_url, echo=echo)
        except (OSError, ValueError) as exc:
            raise StorageUnavailable(f"Cannot open database {database_url!r}: {exc}") from exc

        store = cls(engine, strict=strict)
        try:
            store.init_schema()
        except StoreError:
            engine.dispose()
            raise
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        return store

    def init_schema(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine, checkfirst=True)
        except (SQLAlchemyError, sqlite3.Error) as exc:
            raise StorageUnavailable(f"Cannot initialize schema: {exc}") from exc

    def ping(self) -> None:
        with self._session() as db:
            db.execute(text("SELECT 1"))

    def close(self) -> None:
        self.engine.dispose()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except IntegrityError as exc:
            db.rollback()
            raise ConstraintError(str(exc.orig)) from exc
        except StatementError as exc:
            db.rollback()
            raise StoreError(str(exc.orig)) from exc
        except OverflowError as exc:
            # integer too wide for a SQLite column
            db.rollback()
            raise StoreError(str(exc)) from exc
        finally:
            db.close()

    # habits

    def list_habits(self) -> list[HabitOut]:
        with self._session() as db:
            return [HabitOut.model_validate(h) for h in crud.list_habits(db)]

    def get_habit(self, habit_id: int) -> Optional[HabitOut]:
        with self._session() as db:
            habit = crud.get_habit(db, habit_id)
            return HabitOut.model_validate(habit) if habit else None

    def add_habit(self, name: str, habit_type: str, color: str, target_value: Optional[float] = None) -> HabitOut:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Habit name must not be empty")
        if habit_type not in HABIT_TYPES:
            raise ValidationError(f"Unknown habit type {habit_type!r}")

        with self._session() as db:
            habit = crud.add_habit(db, name, habit_type, color, target_value)
            return HabitOut.model_validate(habit)

    def update_habit(self, habit_id: int, name: str, color: str, target_value: Optional[float] = None) -> int:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Habit name must not be empty")

        with self._session() as db:
            found = crud.update_habit(db, habit_id, name, color, target_value)
        if not found:
            logger.warning("Update of missing habit id=%s ignored", habit_id)
            if self.strict:
                raise HabitNotFound(habit_id)
        return habit_id

    def delete_habit(self, habit_id: int) -> int:
        with self._session() as db:
            found = crud.delete_habit(db, habit_id)
        if not found and self.strict:
            raise HabitNotFound(habit_id)
        return habit_id

    # records

    def get_records(self, start: DayLike, end: DayLike) -> list[RecordOut]:
        start_day, end_day = _as_day(start), _as_day(end)
        with self._session() as db:
            return [RecordOut.model_validate(r) for r in crud.get_records(db, start_day, end_day)]

    def get_all_records(self) -> list[RecordOut]:
        with self._session() as db:
            return [RecordOut.model_validate(r) for r in crud.get_all_records(db)]

    def get_habit_records(self, habit_id: int) -> list[RecordOut]:
        with self._session() as db:
            return [RecordOut.model_validate(r) for r in crud.get_habit_records(db, habit_id)]

    def upsert_record(self, habit_id: int, day: DayLike, status: str, value: Optional[float] = None) -> None:
        if status not in RECORD_STATUSES:
            raise ValidationError(f"Unknown record status {status!r}")

        with self._session() as db:
            crud.upsert_record(db, habit_id, _as_day(day), status, value)


def _as_day(value: DayLike) -> date:
    try:
        return parse_day(value)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
