from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Mapping, Optional

from ..core.enums import Meal


@dataclass(frozen=True)
class Meals:
    """Which meals a resident will take; True means "will eat"."""

    morning: bool = True
    noon: bool = True
    night: bool = True

    @classmethod
    def from_mapping(cls, value: Mapping[str, bool]) -> "Meals":
        return cls(
            morning=bool(value[Meal.MORNING.value]),
            noon=bool(value[Meal.NOON.value]),
            night=bool(value[Meal.NIGHT.value]),
        )

    @property
    def is_cut(self) -> bool:
        """A mess cut: opted out of every meal of the day."""
        return not (self.morning or self.noon or self.night)

    def is_absent(self, meal: Meal) -> bool:
        return not getattr(self, meal.value)

    def to_dict(self) -> dict[str, bool]:
        return {"morning": self.morning, "noon": self.noon, "night": self.night}


DEFAULT_MEALS = Meals()


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: the explicit meal choice of one resident for one day."""

    attendance_id: int
    user_id: int
    day: date
    meals: Meals
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_cut(self) -> bool:
        return self.meals.is_cut

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "date": self.day.isoformat(),
            "meals": self.meals.to_dict(),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class DayMeals:
    """Read-model: effective meals for a day, with the default applied."""

    day: date
    meals: Meals
    marked: bool

    def to_dict(self) -> dict:
        return {"date": self.day.isoformat(), "meals": self.meals.to_dict(), "marked": self.marked}


def effective_meals(record: Optional[AttendanceRecord]) -> Meals:
    """Absent records mean fully present; the one place the default is applied."""
    return record.meals if record is not None else DEFAULT_MEALS
