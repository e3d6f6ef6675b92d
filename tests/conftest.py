"""
pytest Fixtures for Book Library Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions, each wrapped in a transaction that is
  rolled back afterwards so tests don't see each other's rows
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from booklibrary.database import Base, get_db
from booklibrary.main import app
from booklibrary.models import Book, Reader
from booklibrary.repositories import BookRepository, ReaderRepository
from booklibrary.services.library import LibraryService

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.
# SQLite doesn't enforce foreign keys unless asked to, which lets the
# integrity tests store a book pointing at a reader that doesn't exist.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session joins an outer transaction that's rolled back after the
    test, so commits made by the code under test never persist.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session; the
    library service and repositories are built on top of it per request.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def library(db_session: Session) -> LibraryService:
    """Library service over the test session."""
    return LibraryService(BookRepository(db_session), ReaderRepository(db_session))


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_reader(db_session: Session) -> Reader:
    """Create a sample reader for testing."""
    reader = Reader(name="Jonny")
    db_session.add(reader)
    db_session.commit()
    db_session.refresh(reader)
    return reader


@pytest.fixture
def second_reader(db_session: Session) -> Reader:
    """Create a second reader for testing competing borrows."""
    reader = Reader(name="Yevhenii")
    db_session.add(reader)
    db_session.commit()
    db_session.refresh(reader)
    return reader


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create an available book for testing."""
    book = Book(name="Martin Eden", author="Jack London")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def borrowed_book(db_session: Session, sample_reader: Reader) -> Book:
    """Create a book currently held by sample_reader."""
    book = Book(name="1984", author="George Orwell", reader_id=sample_reader.id)
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create several available books."""
    books = [
        Book(name="1984", author="Toni Morrison"),
        Book(name="Home", author="George Orwell"),
        Book(name="Glue", author="Irvine Welsh"),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books
