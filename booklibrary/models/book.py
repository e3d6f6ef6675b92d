"""
Book Model

The central model of the library. A book is either in the library
(reader_id is NULL) or held by exactly one reader.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booklibrary.database import Base
from booklibrary.services.lending import LendingStatus, status_from_reader_id

if TYPE_CHECKING:
    from booklibrary.models.reader import Reader


class Book(Base):
    """
    Book model representing books in the library.

    Table: book

    Fields:
    - name: Book title (required)
    - author: Author's name (required)
    - reader_id: Reader currently holding the book, NULL when available

    Relationships:
    - reader: Many-to-One, the current holder (if any)

    Indexes:
    - Primary key on id (automatic)
    - reader_id: Index for "books borrowed by reader" lookups

    Example:
        book = Book(name="1984", author="George Orwell")
        book.status  # Available()
    """

    __tablename__ = "book"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author's full name"
    )

    # -------------------------------------------------------------------------
    # Borrow Link
    # -------------------------------------------------------------------------
    # The only mutable relationship in the system. Set by a borrow, cleared
    # by a return. ondelete is left as the default: a reader who still holds
    # books cannot be deleted out from under them.
    reader_id: Mapped[int | None] = mapped_column(
        ForeignKey("reader.id"),
        index=True,
        nullable=True,
        comment="Reader currently holding the book, NULL if in library"
    )

    reader: Mapped["Reader | None"] = relationship(
        "Reader",
        back_populates="books",
    )

    @property
    def status(self) -> LendingStatus:
        """Lending status derived from reader_id."""
        return status_from_reader_id(self.reader_id)

    def __repr__(self) -> str:
        return f"Book(id={self.id}, name='{self.name}', author='{self.author}')"
