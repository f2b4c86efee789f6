"""API routes package"""

from . import family, meals, plans, picks, shopping, suggestions, health

__all__ = ["family", "meals", "plans", "picks", "shopping", "suggestions", "health"]
