"""
Library Console

Command-line access to the library service, using the same combined input
formats as the HTTP-less console this backend grew out of.

Usage:
    booklibrary init-db [--reset]
    booklibrary books
    booklibrary readers
    booklibrary add-reader "Jonny"
    booklibrary add-book "1984/George Orwell"
    booklibrary borrow 1/1          # bookId/readerId
    booklibrary return 1
    booklibrary reader-of 1
    booklibrary books-of 1

Each command runs in its own database session. Library errors are printed
to stderr and the process exits with status 1.
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session

from booklibrary.config import get_settings
from booklibrary.database import SessionLocal, create_tables, drop_tables
from booklibrary.exceptions import LibraryError
from booklibrary.models import Book, Reader
from booklibrary.repositories import BookRepository, ReaderRepository
from booklibrary.services.library import LibraryService

logger = logging.getLogger(__name__)


def format_book(book: Book) -> str:
    holder = f"reader {book.reader_id}" if book.status.is_borrowed else "in library"
    return f"{book.id}. {book.name} by {book.author} ({holder})"


def format_reader(reader: Reader) -> str:
    return f"{reader.id}. {reader.name}"


def _print_books(books: Sequence[Book]) -> None:
    if not books:
        print("No books.")
    for book in books:
        print(format_book(book))


def _print_readers(readers: Sequence[Reader]) -> None:
    if not readers:
        print("No readers.")
    for reader in readers:
        print(format_reader(reader))


# =============================================================================
# Commands
# =============================================================================
# Each command receives the service and the parsed arguments.

def cmd_books(library: LibraryService, args: argparse.Namespace) -> None:
    _print_books(library.find_all_books())


def cmd_readers(library: LibraryService, args: argparse.Namespace) -> None:
    _print_readers(library.find_all_readers())


def cmd_add_reader(library: LibraryService, args: argparse.Namespace) -> None:
    reader = library.add_new_reader(args.name)
    print(f"Reader added: {format_reader(reader)}")


def cmd_add_book(library: LibraryService, args: argparse.Namespace) -> None:
    book = library.add_new_book(args.book)
    print(f"Book added: {format_book(book)}")


def cmd_borrow(library: LibraryService, args: argparse.Namespace) -> None:
    book = library.borrow_book(args.ids)
    print(f"Borrowed: {format_book(book)}")


def cmd_return(library: LibraryService, args: argparse.Namespace) -> None:
    book = library.return_book_to_library(args.book_id)
    print(f"Returned: {format_book(book)}")


def cmd_reader_of(library: LibraryService, args: argparse.Namespace) -> None:
    reader = library.show_current_reader_of_book(args.book_id)
    if reader is None:
        print("This Book is in the Library.")
    else:
        print(format_reader(reader))


def cmd_books_of(library: LibraryService, args: argparse.Namespace) -> None:
    _print_books(library.show_borrowed_books(args.reader_id))


Command = Callable[[LibraryService, argparse.Namespace], None]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per library operation."""
    parser = argparse.ArgumentParser(
        prog="booklibrary",
        description="Manage readers, books and lending from the command line",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_db = subparsers.add_parser("init-db", help="Create the database tables")
    init_db.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables first (deletes all data!)",
    )

    subparsers.add_parser("books", help="List all books").set_defaults(handler=cmd_books)
    subparsers.add_parser("readers", help="List all readers").set_defaults(handler=cmd_readers)

    add_reader = subparsers.add_parser("add-reader", help="Register a reader")
    add_reader.add_argument("name", help="Reader's name")
    add_reader.set_defaults(handler=cmd_add_reader)

    add_book = subparsers.add_parser("add-book", help="Add a book")
    add_book.add_argument("book", help="Book as 'Title/Author'")
    add_book.set_defaults(handler=cmd_add_book)

    borrow = subparsers.add_parser("borrow", help="Lend a book to a reader")
    borrow.add_argument("ids", help="'bookId/readerId'")
    borrow.set_defaults(handler=cmd_borrow)

    return_book = subparsers.add_parser("return", help="Return a book to the library")
    return_book.add_argument("book_id", help="Book ID")
    return_book.set_defaults(handler=cmd_return)

    reader_of = subparsers.add_parser("reader-of", help="Show who holds a book")
    reader_of.add_argument("book_id", help="Book ID")
    reader_of.set_defaults(handler=cmd_reader_of)

    books_of = subparsers.add_parser("books-of", help="Show the books a reader holds")
    books_of.add_argument("reader_id", help="Reader ID")
    books_of.set_defaults(handler=cmd_books_of)

    return parser


def run(
    argv: Sequence[str] | None = None,
    session_factory: Callable[[], Session] = SessionLocal,
) -> int:
    """
    Parse argv and run one command.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        session_factory: Creates the session the command runs in

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    if args.command == "init-db":
        if args.reset:
            drop_tables()
            logger.warning("All tables dropped")
        create_tables()
        print("Database initialised.")
        return 0

    handler: Command = args.handler
    db = session_factory()
    try:
        handler(LibraryService(BookRepository(db), ReaderRepository(db)), args)
    except LibraryError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    return 0


def main() -> None:
    """Console script entry point."""
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
