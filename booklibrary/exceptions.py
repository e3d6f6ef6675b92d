"""
Library Exceptions

Every error the library raises for bad input or an illegal borrow/return
derives from LibraryError. Each class carries the HTTP status the API
answers with, so the exception handler in main.py stays a one-liner and the
console can print the same message.

Hierarchy:
    LibraryError
    ├── InvalidIdError              400 malformed id / illegal transition
    │   ├── BookNotFoundError       404
    │   └── ReaderNotFoundError     404
    ├── InvalidNameError            400
    ├── InvalidBookTitleError       400
    ├── InvalidInputFormatError     400
    └── InvalidRequestBodyError     400
"""

from fastapi import status

BOOK_NOT_FOUND = "This Book ID doesn't exist!"
READER_NOT_FOUND = "This Reader ID doesn't exist!"


class LibraryError(Exception):
    """Base exception for library operations."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidIdError(LibraryError):
    """Raised for a malformed identifier or an illegal state transition."""


class BookNotFoundError(InvalidIdError):
    """Raised when a book id doesn't exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = BOOK_NOT_FOUND) -> None:
        super().__init__(message)


class ReaderNotFoundError(InvalidIdError):
    """Raised when a reader id doesn't exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = READER_NOT_FOUND) -> None:
        super().__init__(message)


class InvalidNameError(LibraryError):
    """Raised for a blank reader or author name."""


class InvalidBookTitleError(LibraryError):
    """Raised for a blank book title."""


class InvalidInputFormatError(LibraryError):
    """Raised when a combined "a/b" input doesn't split into two valid parts."""


class InvalidRequestBodyError(LibraryError):
    """Raised when a create request carries a value the store assigns."""
