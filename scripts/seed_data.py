#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample readers and books, and lends a couple
of books out, for development and manual testing.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py
    python scripts/seed_data.py --keep   # don't clear existing rows first

Everything goes through LibraryService, so the seed data obeys the same
rules as the API.
"""

import argparse

from sqlalchemy import delete
from sqlalchemy.orm import Session

from booklibrary.database import SessionLocal, create_tables
from booklibrary.models import Book, Reader
from booklibrary.repositories import BookRepository, ReaderRepository
from booklibrary.services.library import LibraryService

READERS = ["Jonny", "Yevhenii", "Maria"]

BOOKS = [
    "1984/George Orwell",
    "Martin Eden/Jack London",
    "Home/Toni Morrison",
    "Glue/Irvine Welsh",
    "Pride and Prejudice/Jane Austen",
    "The Old Man and the Sea/Ernest Hemingway",
]

# (book position, reader position) in the lists above
LOANS = [(0, 0), (1, 1), (4, 0)]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Reader))
    db.commit()
    print("Data cleared.")


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        library = LibraryService(BookRepository(db), ReaderRepository(db))

        readers = [library.add_new_reader(name) for name in READERS]
        print(f"Created {len(readers)} readers.")

        books = [library.add_new_book(entry) for entry in BOOKS]
        print(f"Created {len(books)} books.")

        for book_index, reader_index in LOANS:
            library.borrow_book(f"{books[book_index].id}/{readers[reader_index].id}")
        print(f"Lent out {len(LOANS)} books.")

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the library database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing them first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)


if __name__ == "__main__":
    main()
