"""
Library Service

Business rules for readers, books and the borrow/return cycle.

A book moves between two states:

    Available ──borrow──▶ Borrowed(reader_id)
        ▲                        │
        └────────return──────────┘

Every operation validates its raw input first, then checks that the ids it
refers to exist, then enforces the transition rule. Operations that take
ids accept them as strings (the console and URL path segments both deliver
text) and report malformed values as InvalidIdError / InvalidInputFormatError.

The service does not open sessions or build repositories; both stores are
handed to the constructor:

    service = LibraryService(BookRepository(db), ReaderRepository(db))
"""

import logging

from booklibrary.exceptions import (
    READER_NOT_FOUND,
    BookNotFoundError,
    InvalidIdError,
    ReaderNotFoundError,
)
from booklibrary.models import Book, Reader
from booklibrary.repositories import BookRepository, ReaderRepository
from booklibrary.services import validator
from booklibrary.services.lending import Available, Borrowed

logger = logging.getLogger(__name__)

ALREADY_BORROWED = "Cannot borrow already borrowed Book!"
ALREADY_IN_LIBRARY = "Cannot return Book. Book is already in the Library!"


class LibraryService:
    """Reader/book queries and the borrow/return state machine."""

    def __init__(
        self,
        book_repository: BookRepository,
        reader_repository: ReaderRepository,
    ) -> None:
        self.books = book_repository
        self.readers = reader_repository

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def find_all_books(self) -> list[Book]:
        return self.books.find_all()

    def find_all_readers(self) -> list[Reader]:
        return self.readers.find_all()

    def show_current_reader_of_book(self, book_id: str) -> Reader | None:
        """
        Return the reader currently holding the book.

        Returns:
            The Reader, or None if the book is in the library

        Raises:
            InvalidIdError: If book_id is malformed, or the book points at a
                reader that no longer exists
            BookNotFoundError: If no book has this id
        """
        book = self._get_book(validator.parse_id(book_id))

        match book.status:
            case Available():
                return None
            case Borrowed(reader_id=reader_id):
                reader = self.readers.find_by_id(reader_id)
                if reader is None:
                    raise self._dangling_reader(book)
                return reader

    def show_borrowed_books(self, reader_id: str) -> list[Book]:
        """
        Return every book the reader currently holds.

        Raises:
            InvalidIdError: If reader_id is malformed
            ReaderNotFoundError: If no reader has this id
        """
        reader = self._get_reader(validator.parse_id(reader_id))
        return self.books.find_all_by_reader_id(reader.id)

    def find_all_books_with_readers(self) -> list[Book]:
        """
        Every borrowed book, each with its reader loaded.

        Raises:
            InvalidIdError: If a book points at a reader that no longer exists
        """
        books = self.books.find_all_borrowed()
        for book in books:
            if book.reader is None:
                raise self._dangling_reader(book)
        return books

    def find_all_readers_with_books(self) -> list[Reader]:
        """Every reader holding at least one book, each with its books loaded."""
        return self.readers.find_all_with_books()

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------
    def add_new_reader(self, name: str) -> Reader:
        """
        Register a reader.

        Raises:
            InvalidNameError: If name is blank
        """
        validator.validate_name(name)
        reader = self.readers.save(Reader(name=name.strip()))
        logger.info(f"Registered reader {reader.id}")
        return reader

    def add_new_book(self, title_and_author: str) -> Book:
        """
        Add a book given as "Title/Author".

        Raises:
            InvalidInputFormatError: If the input isn't "Title/Author"
            InvalidBookTitleError: If the title is blank
            InvalidNameError: If the author is blank
        """
        validator.validate_new_book_input_format(title_and_author)
        title, author = validator.split_pair(title_and_author)
        return self.save_book(title, author)

    def save_book(self, name: str, author: str) -> Book:
        """
        Add a book in the Available state.

        Raises:
            InvalidBookTitleError: If name is blank
            InvalidNameError: If author is blank
        """
        validator.validate_book_title(name)
        validator.validate_name(author)
        book = self.books.save(Book(name=name.strip(), author=author.strip()))
        logger.info(f"Added book {book.id}")
        return book

    # -------------------------------------------------------------------------
    # Borrow / Return
    # -------------------------------------------------------------------------
    def borrow_book(self, book_id_and_reader_id: str) -> Book:
        """
        Lend a book to a reader. Input is "bookId/readerId".

        Raises:
            InvalidInputFormatError: If the input isn't two positive ids
            BookNotFoundError: If the book doesn't exist
            ReaderNotFoundError: If the reader doesn't exist
            InvalidIdError: If the book is already borrowed
        """
        validator.validate_id_to_borrow_book(book_id_and_reader_id)
        raw_book_id, raw_reader_id = validator.split_pair(book_id_and_reader_id)

        book = self._get_book(int(raw_book_id))
        reader = self._get_reader(int(raw_reader_id))

        if book.status.is_borrowed:
            raise InvalidIdError(ALREADY_BORROWED)

        # Lost a race with a concurrent borrow
        if not self.books.borrow(book.id, reader.id):
            raise InvalidIdError(ALREADY_BORROWED)

        logger.info(f"Book {book.id} borrowed by reader {reader.id}")
        return book

    def return_book_to_library(self, book_id: str) -> Book:
        """
        Put a borrowed book back in the library.

        Raises:
            InvalidIdError: If book_id is malformed or the book is already
                in the library
            BookNotFoundError: If the book doesn't exist
        """
        book = self._get_book(validator.parse_id(book_id))

        if not book.status.is_borrowed:
            raise InvalidIdError(ALREADY_IN_LIBRARY)

        if not self.books.return_to_library(book.id):
            raise InvalidIdError(ALREADY_IN_LIBRARY)

        logger.info(f"Book {book.id} returned to library")
        return book

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _get_book(self, book_id: int) -> Book:
        book = self.books.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError()
        return book

    def _get_reader(self, reader_id: int) -> Reader:
        reader = self.readers.find_by_id(reader_id)
        if reader is None:
            raise ReaderNotFoundError()
        return reader

    def _dangling_reader(self, book: Book) -> InvalidIdError:
        logger.error(
            f"Data integrity violation: book {book.id} is linked "
            f"to missing reader {book.reader_id}"
        )
        return InvalidIdError(READER_NOT_FOUND)
