import logging
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from habitgrid.models import Habit

logger = logging.getLogger(__name__)


def list_habits(db: Session) -> list[Habit]:
    return list(db.scalars(select(Habit).order_by(Habit.created_at.desc(), Habit.id.desc())))


def get_habit(db: Session, habit_id: int) -> Optional[Habit]:
    return db.get(Habit, habit_id)


def add_habit(db: Session, name: str, habit_type: str, color: str, target_value: Optional[float] = None) -> Habit:
    habit = Habit(name=name, type=habit_type, color=color, target_value=target_value)
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("Added habit %s (%s) id=%s", habit.name, habit.type, habit.id)
    return habit


def update_habit(db: Session, habit_id: int, name: str, color: str, target_value: Optional[float] = None) -> bool:
    result = db.execute(
        update(Habit).where(Habit.id == habit_id).values(name=name, color=color, target_value=target_value)
    )
    db.commit()
    return result.rowcount > 0


def delete_habit(db: Session, habit_id: int) -> bool:
    # records go with it through ON DELETE CASCADE
    result = db.execute(delete(Habit).where(Habit.id == habit_id))
    db.commit()
    if result.rowcount:
        logger.info("Deleted habit id=%s", habit_id)
    return result.rowcount > 0
