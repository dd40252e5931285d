from habitgrid.schemas.bridge import BridgeResponse
from habitgrid.schemas.habit import HabitCreateIn, HabitIdIn, HabitIdOut, HabitOut, HabitUpdateIn
from habitgrid.schemas.record import RecordOut, RecordRangeIn, RecordUpsertIn
from habitgrid.schemas.stats import ConsistencyPoint, StatsIn, StatsOut

__all__ = [
    "BridgeResponse",
    "HabitOut",
    "HabitCreateIn",
    "HabitUpdateIn",
    "HabitIdIn",
    "HabitIdOut",
    "RecordOut",
    "RecordRangeIn",
    "RecordUpsertIn",
    "StatsIn",
    "StatsOut",
    "ConsistencyPoint",
]
