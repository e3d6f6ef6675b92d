"""
SQLAlchemy Models Package

This package contains all database models for the Book Library API.

Model Relationships:
- Reader <-> Book: One-to-Many through book.reader_id (a reader can hold
                   many books, a book is held by at most one reader)

Importing all models here makes them available as
`from booklibrary.models import Book, Reader` and ensures Alembic
discovers them for migrations.
"""

# The order matters for SQLAlchemy to resolve relationships
from booklibrary.models.reader import Reader
from booklibrary.models.book import Book

__all__ = [
    "Reader",
    "Book",
]
