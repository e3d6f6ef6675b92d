"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields
- XxxCreate: Fields accepted when creating a new record
- XxxResponse: Fields returned in API responses
"""

from booklibrary.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookWithReaderResponse,
    ReaderWithBooksResponse,
)
from booklibrary.schemas.reader import (
    ReaderBase,
    ReaderCreate,
    ReaderResponse,
)

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookResponse",
    "BookWithReaderResponse",
    # Reader schemas
    "ReaderBase",
    "ReaderCreate",
    "ReaderResponse",
    "ReaderWithBooksResponse",
]
