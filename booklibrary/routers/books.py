"""
Books Router

Endpoints for the book catalogue and the borrow/return cycle.

Path ids are declared as `str` on purpose: the library service validates
them, so "/books/abc/reader" and "/books/0/reader" get the same 400 message
the console prints instead of a framework-generated 422.
"""

from typing import List

from fastapi import APIRouter, status

from booklibrary.dependencies import Library
from booklibrary.exceptions import InvalidRequestBodyError
from booklibrary.schemas import (
    BookCreate,
    BookResponse,
    BookWithReaderResponse,
    ReaderResponse,
)
from booklibrary.services.validator import SEPARATOR

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"description": "Invalid id, input or state transition"},
        404: {"description": "Book or reader not found"},
    },
)


@router.get(
    "",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get every book in the library, borrowed or not.",
)
def list_books(library: Library) -> List[BookResponse]:
    """List all books."""
    return [BookResponse.model_validate(book) for book in library.find_all_books()]


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_200_OK,
    summary="Add a new book",
    description="Add a book to the library. The id is assigned by the database.",
)
def create_book(book_data: BookCreate, library: Library) -> BookResponse:
    """
    Add a new book.

    Example request body:
    {
        "name": "Martin Eden",
        "author": "Jack London"
    }
    """
    if book_data.id is not None:
        raise InvalidRequestBodyError("Request body should not contain book id value")

    book = library.save_book(book_data.name, book_data.author)
    return BookResponse.model_validate(book)


@router.get(
    "/readers",
    response_model=List[BookWithReaderResponse],
    summary="List borrowed books with readers",
    description="Get every borrowed book together with the reader holding it.",
)
def list_books_with_readers(library: Library) -> List[BookWithReaderResponse]:
    """List borrowed books paired with their readers."""
    return [
        BookWithReaderResponse.model_validate(book)
        for book in library.find_all_books_with_readers()
    ]


@router.get(
    "/{book_id}/reader",
    response_model=ReaderResponse | None,
    summary="Get the current reader of a book",
    description="Returns the reader holding the book, or null if it is in the library.",
)
def get_book_reader(book_id: str, library: Library) -> ReaderResponse | None:
    """Get the reader currently holding a book."""
    reader = library.show_current_reader_of_book(book_id)
    if reader is None:
        return None
    return ReaderResponse.model_validate(reader)


@router.post(
    "/{book_id}/readers/{reader_id}",
    status_code=status.HTTP_200_OK,
    summary="Borrow a book",
    description="Lend an available book to a reader.",
)
def borrow_book(book_id: str, reader_id: str, library: Library) -> None:
    """Borrow a book."""
    library.borrow_book(SEPARATOR.join((book_id, reader_id)))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_200_OK,
    summary="Return a book",
    description="Return a borrowed book to the library.",
)
def return_book(book_id: str, library: Library) -> None:
    """Return a book to the library."""
    library.return_book_to_library(book_id)
