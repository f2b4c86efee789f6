"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    DinnerMatchError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    InvalidStateError,
)

__all__ = [
    "settings",
    "DinnerMatchError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "InvalidStateError",
]
