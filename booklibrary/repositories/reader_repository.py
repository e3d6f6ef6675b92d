"""
Reader Repository

Data access for the reader table.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from booklibrary.models import Book, Reader

logger = logging.getLogger(__name__)


class ReaderRepository:
    """SQLAlchemy-backed store for Reader rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> list[Reader]:
        stmt = select(Reader).order_by(Reader.id)
        return list(self.session.execute(stmt).scalars().all())

    def find_by_id(self, reader_id: int) -> Reader | None:
        return self.session.get(Reader, reader_id)

    def save(self, reader: Reader) -> Reader:
        """Insert a new reader and return it with its assigned id."""
        self.session.add(reader)
        self.session.commit()
        self.session.refresh(reader)
        logger.debug(f"Saved {reader!r}")
        return reader

    def find_all_with_books(self) -> list[Reader]:
        """Readers currently holding at least one book, books eagerly loaded."""
        holders = select(Book.reader_id).where(Book.reader_id.is_not(None))
        stmt = (
            select(Reader)
            .options(selectinload(Reader.books))
            .where(Reader.id.in_(holders))
            .order_by(Reader.id)
        )
        return list(self.session.execute(stmt).scalars().all())
