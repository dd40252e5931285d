from habitgrid.crud.habits import add_habit, delete_habit, get_habit, list_habits, update_habit
from habitgrid.crud.records import get_all_records, get_habit_records, get_records, upsert_record

__all__ = [
    "list_habits",
    "get_habit",
    "add_habit",
    "update_habit",
    "delete_habit",
    "get_records",
    "get_all_records",
    "get_habit_records",
    "upsert_record",
]
