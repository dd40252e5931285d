from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from habitgrid.schemas.ids import RowId

HabitType = Literal["boolean", "numeric"]


def clean_habit_name(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError("Habit name must not be empty")
    return value


class HabitOut(BaseModel):
    id: int
    name: str
    type: HabitType
    color: str
    target_value: Optional[float] = None
    created_at: datetime

    class Config:
        from_attributes = True


class HabitCreateIn(BaseModel):
    name: str
    type: HabitType
    color: str
    target_value: Optional[float] = Field(default=None, alias="targetValue")

    class Config:
        populate_by_name = True

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return clean_habit_name(value)


class HabitUpdateIn(BaseModel):
    id: RowId
    name: str
    color: str
    target_value: Optional[float] = Field(default=None, alias="targetValue")

    class Config:
        populate_by_name = True

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return clean_habit_name(value)


class HabitIdIn(BaseModel):
    id: RowId


class HabitIdOut(BaseModel):
    id: int
