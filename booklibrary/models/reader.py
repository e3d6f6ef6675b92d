"""
Reader Model

Represents a registered library reader.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booklibrary.database import Base

if TYPE_CHECKING:
    from booklibrary.models.book import Book


class Reader(Base):
    """
    Reader model representing people who borrow books.

    Table: reader

    Relationships:
    - books: One-to-Many, the books this reader currently holds
             (Book.reader_id points here)

    Example:
        reader = Reader(name="Jonny")
        db.add(reader)
        db.commit()
    """

    __tablename__ = "reader"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Reader's full name"
    )

    # Only the books currently borrowed; history is not kept
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="reader",
        order_by="Book.id",
    )

    def __repr__(self) -> str:
        return f"Reader(id={self.id}, name='{self.name}')"
