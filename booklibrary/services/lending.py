"""
Lending Status

A book is either in the library or held by exactly one reader. The database
stores this as a nullable reader_id column; in Python it is modelled as a
small sum type so callers match on the state instead of testing for None:

    match book.status:
        case Available():
            ...
        case Borrowed(reader_id=reader_id):
            ...
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Available:
    """The book is in the library."""

    @property
    def is_borrowed(self) -> bool:
        return False


@dataclass(frozen=True)
class Borrowed:
    """The book is held by the reader with this id."""

    reader_id: int

    def __post_init__(self) -> None:
        if self.reader_id <= 0:
            raise ValueError(f"reader_id must be positive, got {self.reader_id}")

    @property
    def is_borrowed(self) -> bool:
        return True


LendingStatus = Available | Borrowed


def status_from_reader_id(reader_id: int | None) -> LendingStatus:
    """
    Build the lending status from the stored reader_id column.

    Older rows mark an available book with reader_id 0 instead of NULL.
    """
    if not reader_id:
        return Available()
    return Borrowed(reader_id)
