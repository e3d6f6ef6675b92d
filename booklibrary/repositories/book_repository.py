"""
Book Repository

Data access for the book table, including the borrow link.

Borrow and return are single conditional UPDATE statements:

    UPDATE book SET reader_id = :reader WHERE id = :book AND reader_id IS NULL

Older rows may mark an available book with reader_id 0; both predicates
treat 0 like NULL.

The affected-row count tells the caller whether the transition happened.
Two requests borrowing the same book can both pass an earlier "is it
available?" read, but only one of them can match the WHERE clause.
"""

import logging

from sqlalchemy import and_, or_, select, update
from sqlalchemy.orm import Session, joinedload

from booklibrary.models import Book

logger = logging.getLogger(__name__)

IS_AVAILABLE = or_(Book.reader_id.is_(None), Book.reader_id == 0)
IS_BORROWED = and_(Book.reader_id.is_not(None), Book.reader_id != 0)


class BookRepository:
    """SQLAlchemy-backed store for Book rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> list[Book]:
        stmt = select(Book).order_by(Book.id)
        return list(self.session.execute(stmt).scalars().all())

    def find_by_id(self, book_id: int) -> Book | None:
        return self.session.get(Book, book_id)

    def save(self, book: Book) -> Book:
        """Insert a new book and return it with its assigned id."""
        self.session.add(book)
        self.session.commit()
        self.session.refresh(book)
        logger.debug(f"Saved {book!r}")
        return book

    def find_all_by_reader_id(self, reader_id: int) -> list[Book]:
        stmt = select(Book).where(Book.reader_id == reader_id).order_by(Book.id)
        return list(self.session.execute(stmt).scalars().all())

    def find_all_borrowed(self) -> list[Book]:
        """
        Every borrowed book with its reader eagerly loaded.

        Newest books first.
        """
        stmt = (
            select(Book)
            .options(joinedload(Book.reader))
            .where(IS_BORROWED)
            .order_by(Book.id.desc())
        )
        return list(self.session.execute(stmt).scalars().all())

    def borrow(self, book_id: int, reader_id: int) -> bool:
        """
        Link the book to the reader if it is currently available.

        Returns:
            True if the book was available and is now borrowed
        """
        stmt = (
            update(Book)
            .where(Book.id == book_id, IS_AVAILABLE)
            .values(reader_id=reader_id)
        )
        return self._execute_transition(stmt)

    def return_to_library(self, book_id: int) -> bool:
        """
        Clear the book's reader link if it is currently borrowed.

        Returns:
            True if the book was borrowed and is now available
        """
        stmt = (
            update(Book)
            .where(Book.id == book_id, IS_BORROWED)
            .values(reader_id=None)
        )
        return self._execute_transition(stmt)

    def _execute_transition(self, stmt) -> bool:
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        self.session.commit()
        return result.rowcount == 1
