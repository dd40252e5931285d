import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from habitgrid.schemas.ids import RowId


class StatsIn(BaseModel):
    habit_id: RowId = Field(alias="habitId")
    today: Optional[dt.date] = None

    class Config:
        populate_by_name = True


class ConsistencyPoint(BaseModel):
    day: dt.date
    pct: int


class StatsOut(BaseModel):
    habit_id: int
    today: dt.date
    total: int
    current_streak: int
    best_streak: int
    rate: int
    consistency: list[ConsistencyPoint]
