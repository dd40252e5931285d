import logging
from datetime import date
from typing import Optional, Protocol

from habitgrid.calendar import TIMELINE_WEEKS, DayLike, format_day, month_headers, parse_day, timeline_days
from habitgrid.schemas import BridgeResponse, HabitOut, RecordOut
from habitgrid.stats import COMPLETED, HabitStats, habit_stats, records_for_habit

logger = logging.getLogger(__name__)

PROVISIONAL_ID = -1


class BridgeLike(Protocol):
    def invoke(self, name: str, payload: Optional[dict] = None) -> BridgeResponse: ...


def next_status(current: Optional[str]) -> str:
    return "missed" if current == COMPLETED else COMPLETED


class ViewState:
    """What the window shows: habits, records and the selected habit.

    Mutations are two-phase. The in-memory copy is patched first so the grid
    updates at once, the write goes through the bridge, then records are
    re-read and the authoritative copy replaces whatever was patched.
    """

    def __init__(self, bridge: BridgeLike, today: date) -> None:
        self.bridge = bridge
        self.today = today
        self.habits: list[HabitOut] = []
        self.records: list[RecordOut] = []
        self.selected_habit_id: Optional[int] = None
        self.last_error: Optional[str] = None

    def _call(self, name: str, payload: Optional[dict] = None):
        response = self.bridge.invoke(name, payload)
        if not response.ok:
            self.last_error = response.error
            logger.warning("%s failed: %s", name, response.error)
            return None
        return response.data

    def load(self) -> None:
        self.last_error = None
        self.load_habits()
        self.load_records()

    def load_habits(self) -> None:
        data = self._call("get-habits")
        if data is None:
            return
        self.habits = [HabitOut.model_validate(item) for item in data]
        ids = {h.id for h in self.habits}
        if self.selected_habit_id not in ids:
            self.selected_habit_id = self.habits[0].id if self.habits else None

    def load_records(self) -> None:
        data = self._call("get-all-records")
        if data is not None:
            self.records = [RecordOut.model_validate(item) for item in data]

    @property
    def selected_habit(self) -> Optional[HabitOut]:
        return next((h for h in self.habits if h.id == self.selected_habit_id), None)

    @property
    def selected_records(self) -> list[RecordOut]:
        if self.selected_habit_id is None:
            return []
        return records_for_habit(self.records, self.selected_habit_id)

    def select(self, habit_id: int) -> None:
        self.selected_habit_id = habit_id

    def stats(self) -> HabitStats:
        return habit_stats(self.selected_records, self.today)

    def timeline(self, weeks: int = TIMELINE_WEEKS) -> list[list[tuple[date, Optional[str]]]]:
        """Week columns of (day, status) for the selected habit, Sunday first."""
        statuses = {r.date: r.status for r in self.selected_records}
        cells = [(day, statuses.get(day)) for day in timeline_days(self.today, weeks)]
        return [cells[i : i + 7] for i in range(0, len(cells), 7)]

    def timeline_headers(self, weeks: int = TIMELINE_WEEKS) -> list[tuple[str, int]]:
        return month_headers(timeline_days(self.today, weeks))

    def add_habit(self, name: str, habit_type: str, color: str, target_value: Optional[float] = None) -> Optional[HabitOut]:
        self.last_error = None
        data = self._call("add-habit", {"name": name, "type": habit_type, "color": color, "targetValue": target_value})
        if data is None:
            return None
        habit = HabitOut.model_validate(data)
        self.load_habits()
        self.selected_habit_id = habit.id
        return habit

    def update_selected(self, name: str, color: str, target_value: Optional[float] = None) -> bool:
        self.last_error = None
        if self.selected_habit_id is None:
            return False
        payload = {"id": self.selected_habit_id, "name": name, "color": color, "targetValue": target_value}
        ok = self._call("update-habit", payload) is not None
        self.load_habits()
        return ok

    def delete_selected(self) -> bool:
        if self.selected_habit_id is None:
            return False
        self.last_error = None
        ok = self._call("delete-habit", {"id": self.selected_habit_id}) is not None
        self.selected_habit_id = None
        self.load_habits()
        self.load_records()
        return ok

    def toggle(self, day: DayLike) -> Optional[str]:
        """Flip the selected habit's mark for ``day`` between completed and missed."""
        if self.selected_habit_id is None:
            return None

        day = parse_day(day)
        habit_id = self.selected_habit_id
        existing = next((r for r in self.records if r.habit_id == habit_id and r.date == day), None)
        status = next_status(existing.status if existing else None)

        self.last_error = None
        self._apply_provisional(habit_id, day, status)
        self._call("upsert-record", {"habitId": habit_id, "date": format_day(day), "status": status})
        self.load_records()
        return status

    def _apply_provisional(self, habit_id: int, day: date, status: str) -> None:
        patched = list(self.records)
        for i, record in enumerate(patched):
            if record.habit_id == habit_id and record.date == day:
                patched[i] = record.model_copy(update={"status": status})
                break
        else:
            patched.append(RecordOut(id=PROVISIONAL_ID, habit_id=habit_id, date=day, status=status))
        self.records = patched
