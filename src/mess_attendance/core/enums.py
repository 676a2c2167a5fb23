from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "admin"
    STUDENT = "student"


class Meal(str, Enum):
    """The three daily meals served by the mess, in serving order."""

    MORNING = "morning"
    NOON = "noon"
    NIGHT = "night"
