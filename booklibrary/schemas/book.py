"""
Book Pydantic Schemas

Handles:
- Book creation (title and author)
- Plain book responses
- Joined responses pairing books with their readers and readers with
  the books they hold
"""

from pydantic import BaseModel, ConfigDict, Field

from booklibrary.schemas.reader import ReaderResponse


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    Blank titles and authors are rejected by the library service, not here,
    so the HTTP API and the console report them with the same message.
    """

    name: str = Field(
        ...,
        max_length=500,
        description="Book title",
        examples=["1984", "Martin Eden"],
    )

    author: str = Field(
        ...,
        max_length=255,
        description="Author's full name",
        examples=["George Orwell", "Jack London"],
    )


class BookCreate(BookBase):
    """
    Schema for adding a new book.

    Example request body:
    {
        "name": "Martin Eden",
        "author": "Jack London"
    }
    """

    id: int | None = Field(
        default=None,
        description="Must be omitted; assigned by the database",
    )


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "1984",
                "author": "George Orwell",
            }
        },
    )


class BookWithReaderResponse(BookResponse):
    """A borrowed book together with the reader who holds it."""

    reader: ReaderResponse = Field(
        ...,
        description="Reader currently holding the book",
    )


class ReaderWithBooksResponse(ReaderResponse):
    """A reader together with every book they currently hold."""

    books: list[BookResponse] = Field(
        default_factory=list,
        description="Books currently borrowed by this reader",
    )
