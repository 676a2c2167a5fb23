from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class MealCounts:
    morning: int = 0
    noon: int = 0
    night: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"morning": self.morning, "noon": self.noon, "night": self.night}


@dataclass(frozen=True)
class SummaryDetail:
    user_id: int
    full_name: str
    morning_absent: bool
    noon_absent: bool
    night_absent: bool

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "name": self.full_name,
            "morningAbsent": self.morning_absent,
            "noonAbsent": self.noon_absent,
            "nightAbsent": self.night_absent,
        }


@dataclass(frozen=True)
class DailySummary:
    """Read-model: per-meal absences across the roster for one day."""

    day: date
    summary: MealCounts
    details: list[SummaryDetail] = field(default_factory=list)

    @property
    def total_subjects(self) -> int:
        return len(self.details)

    @property
    def cut_count(self) -> int:
        return sum(1 for d in self.details if d.morning_absent and d.noon_absent and d.night_absent)

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "summary": self.summary.to_dict(),
            "details": [d.to_dict() for d in self.details],
            "totalSubjects": self.total_subjects,
            "cutCount": self.cut_count,
        }


@dataclass(frozen=True)
class CutTotal:
    user_id: int
    full_name: str
    total_cuts: int

    def to_dict(self) -> dict:
        return {"userId": self.user_id, "name": self.full_name, "totalCuts": self.total_cuts}


@dataclass(frozen=True)
class CutDay:
    user_id: int
    full_name: str
    day: date

    def to_dict(self) -> dict:
        return {"userId": self.user_id, "name": self.full_name, "date": self.day.isoformat()}


@dataclass(frozen=True)
class CutReport:
    """Read-model: mess cuts per resident over a chosen set of days."""

    dates: list[date]
    summary: list[CutTotal]
    details: list[CutDay]

    def to_dict(self) -> dict:
        return {
            "dates": [d.isoformat() for d in self.dates],
            "summary": [s.to_dict() for s in self.summary],
            "details": [d.to_dict() for d in self.details],
        }
