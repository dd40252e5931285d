import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PayloadError

from habitgrid.errors import ConstraintError, HabitNotFound, StoreError, ValidationError
from habitgrid.schemas import (
    BridgeResponse,
    ConsistencyPoint,
    HabitCreateIn,
    HabitIdIn,
    HabitIdOut,
    HabitUpdateIn,
    RecordRangeIn,
    RecordUpsertIn,
    StatsIn,
    StatsOut,
)
from habitgrid.stats import habit_stats, rolling_consistency
from habitgrid.store import HabitStore

logger = logging.getLogger(__name__)

ERROR_VALIDATION = "validation"
ERROR_CONSTRAINT = "constraint"
ERROR_NOT_FOUND = "not_found"
ERROR_UNKNOWN_CALL = "unknown_call"
ERROR_STORE = "store"


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def _payload_message(exc: PayloadError) -> str:
    parts = []
    for err in exc.errors():
        where = ".".join(str(loc) for loc in err.get("loc", ()))
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


class Bridge:
    """Named request/response calls over a ``HabitStore``.

    ``invoke`` never raises for a failed operation; the failure comes back as
    ``BridgeResponse(ok=False)`` so the caller can show it and carry on.
    """

    def __init__(self, store: HabitStore, clock: Callable[[], date] = date.today) -> None:
        self.store = store
        self.clock = clock
        self._handlers: Dict[str, Callable[[dict], Any]] = {
            "get-habits": self._get_habits,
            "add-habit": self._add_habit,
            "update-habit": self._update_habit,
            "delete-habit": self._delete_habit,
            "get-records": self._get_records,
            "get-all-records": self._get_all_records,
            "upsert-record": self._upsert_record,
            "get-stats": self._get_stats,
        }

    @property
    def names(self) -> list[str]:
        return sorted(self._handlers)

    def invoke(self, name: str, payload: Optional[dict] = None) -> BridgeResponse:
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning("Unknown bridge call %r", name)
            return BridgeResponse(ok=False, error=f"Unknown call {name!r}", error_kind=ERROR_UNKNOWN_CALL)

        try:
            data = handler(payload or {})
        except PayloadError as exc:
            return self._failure(name, _payload_message(exc), ERROR_VALIDATION)
        except ValidationError as exc:
            return self._failure(name, str(exc), ERROR_VALIDATION)
        except HabitNotFound as exc:
            return self._failure(name, str(exc), ERROR_NOT_FOUND)
        except ConstraintError as exc:
            return self._failure(name, f"Constraint violated: {exc}", ERROR_CONSTRAINT)
        except StoreError as exc:
            return self._failure(name, str(exc), ERROR_STORE)
        return BridgeResponse(ok=True, data=_dump(data))

    def _failure(self, name: str, message: str, kind: str) -> BridgeResponse:
        logger.warning("Bridge call %s failed (%s): %s", name, kind, message)
        return BridgeResponse(ok=False, error=message, error_kind=kind)

    def _get_habits(self, payload: dict):
        return self.store.list_habits()

    def _add_habit(self, payload: dict):
        req = HabitCreateIn.model_validate(payload)
        return self.store.add_habit(req.name, req.type, req.color, req.target_value)

    def _update_habit(self, payload: dict):
        req = HabitUpdateIn.model_validate(payload)
        return HabitIdOut(id=self.store.update_habit(req.id, req.name, req.color, req.target_value))

    def _delete_habit(self, payload: dict):
        req = HabitIdIn.model_validate(payload)
        return HabitIdOut(id=self.store.delete_habit(req.id))

    def _get_records(self, payload: dict):
        req = RecordRangeIn.model_validate(payload)
        return self.store.get_records(req.start, req.end)

    def _get_all_records(self, payload: dict):
        return self.store.get_all_records()

    def _upsert_record(self, payload: dict):
        req = RecordUpsertIn.model_validate(payload)
        self.store.upsert_record(req.habit_id, req.date, req.status, req.value)
        return {"ok": True}

    def _get_stats(self, payload: dict):
        req = StatsIn.model_validate(payload)
        if self.store.get_habit(req.habit_id) is None:
            raise HabitNotFound(req.habit_id)

        today = req.today or self.clock()
        records = self.store.get_habit_records(req.habit_id)
        summary = habit_stats(records, today)
        return StatsOut(
            habit_id=req.habit_id,
            today=today,
            total=summary.total,
            current_streak=summary.current_streak,
            best_streak=summary.best_streak,
            rate=summary.rate,
            consistency=[ConsistencyPoint(day=day, pct=pct) for day, pct in rolling_consistency(records, today)],
        )
