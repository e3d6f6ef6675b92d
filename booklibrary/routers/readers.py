"""
Readers Router

Endpoints for registering readers and seeing what they hold.
Follows the same patterns as the books router.
"""

from typing import List

from fastapi import APIRouter, status

from booklibrary.dependencies import Library
from booklibrary.exceptions import InvalidRequestBodyError
from booklibrary.schemas import (
    BookResponse,
    ReaderCreate,
    ReaderResponse,
    ReaderWithBooksResponse,
)

router = APIRouter(
    prefix="/readers",
    tags=["Readers"],
    responses={
        400: {"description": "Invalid id or input"},
        404: {"description": "Reader not found"},
    },
)


@router.get(
    "",
    response_model=List[ReaderResponse],
    summary="List all readers",
)
def list_readers(library: Library) -> List[ReaderResponse]:
    """List all readers."""
    return [ReaderResponse.model_validate(r) for r in library.find_all_readers()]


@router.post(
    "",
    response_model=ReaderResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new reader",
)
def create_reader(reader_data: ReaderCreate, library: Library) -> ReaderResponse:
    """Register a new reader."""
    if reader_data.id is not None:
        raise InvalidRequestBodyError("Request body should not contain reader id value")

    reader = library.add_new_reader(reader_data.name)
    return ReaderResponse.model_validate(reader)


@router.get(
    "/books",
    response_model=List[ReaderWithBooksResponse],
    summary="List readers with their borrowed books",
    description="Get every reader holding at least one book, with those books.",
)
def list_readers_with_books(library: Library) -> List[ReaderWithBooksResponse]:
    """List readers paired with the books they hold."""
    return [
        ReaderWithBooksResponse.model_validate(reader)
        for reader in library.find_all_readers_with_books()
    ]


@router.get(
    "/{reader_id}/books",
    response_model=List[BookResponse],
    summary="Get books borrowed by a reader",
)
def get_reader_books(reader_id: str, library: Library) -> List[BookResponse]:
    """Get all books a reader currently holds."""
    books = library.show_borrowed_books(reader_id)
    return [BookResponse.model_validate(book) for book in books]
