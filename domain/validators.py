"""
Input validation for the service layer.

Predicates return booleans; the ``require_*`` helpers raise
ServiceValidationError so every service can fail fast before touching the
database.
"""

from typing import Any, Iterable, List

from app.exceptions import ServiceValidationError
from domain.enums import PlanStatus

# largest value a signed 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1


def is_valid_id(value: Any) -> bool:
    # bool is an int subclass; True is not an id
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value <= MAX_ID


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_day_of_week(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 6


def is_valid_status(value: Any) -> bool:
    return value in PlanStatus.values()


def is_valid_diners(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(is_valid_id(v) for v in value)


def require_id(value: Any, label: str = "ID") -> int:
    if not is_valid_id(value):
        raise ServiceValidationError(f"Invalid {label}", details={"value": value})
    return value


def require_name(value: Any, label: str = "Name") -> str:
    """Return the trimmed name or raise if it is missing or blank."""
    if not is_non_empty_string(value):
        raise ServiceValidationError(f"{label} is required and cannot be empty")
    return value.strip()


def require_day_of_week(value: Any) -> int:
    if not is_valid_day_of_week(value):
        raise ServiceValidationError(
            "Day must be 0 (Mon) to 6 (Sun)", details={"value": value}
        )
    return value


def require_status(value: Any) -> PlanStatus:
    if not is_valid_status(value):
        raise ServiceValidationError(
            "Status must be: planning, voting, or locked", details={"value": value}
        )
    return PlanStatus(value)


def require_diners(value: Iterable[Any]) -> List[int]:
    """Validate a diner id list and collapse duplicates, keeping first occurrence."""
    if not is_valid_diners(value):
        raise ServiceValidationError("Diners must be an array of member IDs")
    return list(dict.fromkeys(value))
