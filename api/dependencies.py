"""
API dependencies for dependency injection
"""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Each request gets its own session, which is handed explicitly to the
    service layer and closed when the response is sent.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            return PlannerService.list_plans(db)
    """
    yield from get_db_session()
