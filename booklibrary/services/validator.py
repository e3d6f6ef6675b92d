"""
Input Validator

Pure checks run before any input reaches the database or the borrow/return
rules. Every function either returns quietly or raises the matching
LibraryError subclass.

Combined inputs use "/" as separator:
- "Title/Author" when adding a book from the console
- "bookId/readerId" when borrowing
"""

import re

from booklibrary.exceptions import (
    InvalidBookTitleError,
    InvalidIdError,
    InvalidInputFormatError,
    InvalidNameError,
)

SEPARATOR = "/"

# ASCII digits only; str.isdigit() would also accept "²" and friends
_ID_PATTERN = re.compile(r"[0-9]+")

# Largest value a 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1


def _is_positive_id(value: str | None) -> bool:
    if value is None or not _ID_PATTERN.fullmatch(value):
        return False
    return 0 < int(value) <= MAX_ID


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_single_id(value: str | None) -> None:
    """
    Check that value is a positive integer literal.

    Accepts "1" and "42"; rejects "0", "-5", "abc", "", "1.5" and ids
    too large for the id column.

    Raises:
        InvalidIdError: If value is not a positive integer
    """
    if not _is_positive_id(value):
        raise InvalidIdError(f"ID must be a positive number, got '{value}'")


def validate_name(value: str | None) -> None:
    """
    Raises:
        InvalidNameError: If value is empty or whitespace only
    """
    if _is_blank(value):
        raise InvalidNameError("Name must not be empty!")


def validate_book_title(value: str | None) -> None:
    """
    Raises:
        InvalidBookTitleError: If value is empty or whitespace only
    """
    if _is_blank(value):
        raise InvalidBookTitleError("Book title must not be empty!")


def validate_new_book_input_format(value: str | None) -> None:
    """
    Check that value looks like "Title/Author".

    Exactly one separator, and neither side blank. "Title", "Title/" and
    "/Author" are rejected.

    Raises:
        InvalidInputFormatError: If the format is wrong
    """
    parts = value.split(SEPARATOR) if value is not None else []
    if len(parts) != 2 or any(_is_blank(part) for part in parts):
        raise InvalidInputFormatError(
            "Book must be entered as 'Title/Author', e.g. '1984/George Orwell'"
        )


def validate_id_to_borrow_book(value: str | None) -> None:
    """
    Check that value looks like "bookId/readerId" with two positive ids.

    Raises:
        InvalidInputFormatError: If the format is wrong
    """
    parts = value.split(SEPARATOR) if value is not None else []
    if len(parts) != 2 or not all(_is_positive_id(part) for part in parts):
        raise InvalidInputFormatError(
            "Borrow request must be entered as 'bookId/readerId', e.g. '1/2'"
        )


def parse_id(value: str | None) -> int:
    """Validate a single id and return it as an int."""
    validate_single_id(value)
    return int(value)


def split_pair(value: str) -> tuple[str, str]:
    """Split an already validated "a/b" input into its two parts."""
    first, second = value.split(SEPARATOR)
    return first, second
