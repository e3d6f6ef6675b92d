"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

The dependency chain for every library endpoint is:

    get_db()  →  Session (one per request, closed afterwards)
        └── get_library_service(db)  →  LibraryService(BookRepository(db),
                                                       ReaderRepository(db))

Tests swap the database by overriding get_db; the service and repositories
follow automatically.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from booklibrary.database import get_db
from booklibrary.repositories import BookRepository, ReaderRepository
from booklibrary.services.library import LibraryService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
#
# You can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


def get_library_service(db: DbSession) -> LibraryService:
    """
    Build the library service for the current request.

    Args:
        db: Request-scoped database session

    Returns:
        LibraryService wired to repositories over that session
    """
    return LibraryService(BookRepository(db), ReaderRepository(db))


Library = Annotated[LibraryService, Depends(get_library_service)]
