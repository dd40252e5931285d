import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, Field

from habitgrid.schemas.ids import RowId

RecordStatus = Literal["completed", "missed", "skipped", "none"]


class RecordOut(BaseModel):
    id: int
    habit_id: int
    date: dt.date
    status: RecordStatus
    value: Optional[float] = None

    class Config:
        from_attributes = True


class RecordRangeIn(BaseModel):
    start: dt.date
    end: dt.date


class RecordUpsertIn(BaseModel):
    habit_id: RowId = Field(alias="habitId")
    date: dt.date
    status: RecordStatus
    value: Optional[float] = None

    class Config:
        populate_by_name = True
