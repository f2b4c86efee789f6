"""
Domain layer - Household entities, models, schemas, validators and enums.
"""

from domain import enums, models, schemas, validators

__all__ = ["enums", "models", "schemas", "validators"]
