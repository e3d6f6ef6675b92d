"""
Repositories Package

Data-access objects, one per table. Each is constructed with the SQLAlchemy
Session of the current request (or console command) and is handed to the
LibraryService, which never touches the session itself.
"""

from booklibrary.repositories.book_repository import BookRepository
from booklibrary.repositories.reader_repository import ReaderRepository

__all__ = [
    "BookRepository",
    "ReaderRepository",
]
