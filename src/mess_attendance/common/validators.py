from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import Meal
from ..core.exceptions import ValidationError


def require_present(value: Any, field_name: str) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required field: {field_name}")
    return value


def require_meal_flags(value: Any) -> dict[str, bool]:
    """Validate a {morning, noon, night} mapping of booleans."""
    if not isinstance(value, Mapping):
        raise ValidationError("meals must be an object with morning, noon and night")

    flags: dict[str, bool] = {}
    for meal in Meal:
        if meal.value not in value:
            raise ValidationError(f"Missing required field: meals.{meal.value}")
        flag = value[meal.value]
        if not isinstance(flag, bool):
            raise ValidationError(f"meals.{meal.value} must be true or false")
        flags[meal.value] = flag
    return flags


def require_json_object(value: Any) -> dict:
    """Request bodies are JSON objects; a missing body reads as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError("Request body must be a JSON object")
    return value
