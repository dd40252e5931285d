from habitgrid.models.base import Base
from habitgrid.models.habit import HABIT_TYPES, Habit
from habitgrid.models.record import RECORD_STATUSES, Record

__all__ = [
    "Base",
    "Habit",
    "Record",
    "HABIT_TYPES",
    "RECORD_STATUSES",
]
