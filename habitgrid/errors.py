class StoreError(Exception):
    """Base class for everything the store raises."""


class ValidationError(StoreError):
    pass


class ConstraintError(StoreError):
    """A uniqueness, foreign-key or check constraint was violated."""


class HabitNotFound(StoreError):
    def __init__(self, habit_id: int) -> None:
        super().__init__(f"Habit {habit_id} not found")
        self.habit_id = habit_id


class StorageUnavailable(StoreError):
    """The database file can't be opened or initialized."""
