"""
Tests for Books API Endpoints

Tests for /api/v1/books endpoints, including borrow and return.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
"""

from fastapi import status

from booklibrary.models import Book


class TestListBooks:
    """Tests for GET /api/v1/books endpoint."""

    def test_list_books_empty(self, client):
        response = client.get("/api/v1/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(self, client, multiple_books):
        response = client.get("/api/v1/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 3
        for item, book in zip(data, multiple_books):
            assert item == {"id": book.id, "name": book.name, "author": book.author}


class TestCreateBook:
    """Tests for POST /api/v1/books endpoint."""

    def test_create_book_success(self, client, db_session):
        response = client.post(
            "/api/v1/books",
            json={"name": "Martin Eden", "author": "Jack London"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Martin Eden"
        assert data["author"] == "Jack London"

        created = db_session.get(Book, data["id"])
        assert created is not None
        assert created.reader_id is None

    def test_create_book_with_id_rejected(self, client, db_session):
        response = client.post(
            "/api/v1/books",
            json={"id": 4, "name": "Jack London", "author": "Martin Eden"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Request body should not contain book id value"
        assert db_session.get(Book, 4) is None

    def test_create_book_blank_title(self, client):
        response = client.post("/api/v1/books", json={"name": "  ", "author": "Jack London"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "title" in response.json()["detail"].lower()

    def test_create_book_blank_author(self, client):
        response = client.post("/api/v1/books", json={"name": "Martin Eden", "author": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_missing_field(self, client):
        response = client.post("/api/v1/books", json={"name": "Martin Eden"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetBookReader:
    """Tests for GET /api/v1/books/{book_id}/reader endpoint."""

    def test_get_reader_of_borrowed_book(self, client, borrowed_book, sample_reader):
        response = client.get(f"/api/v1/books/{borrowed_book.id}/reader")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": sample_reader.id, "name": "Jonny"}

    def test_get_reader_of_available_book(self, client, sample_book):
        response = client.get(f"/api/v1/books/{sample_book.id}/reader")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None

    def test_get_reader_unknown_book(self, client):
        response = client.get("/api/v1/books/99999/reader")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "This Book ID doesn't exist!"

    def test_get_reader_malformed_id(self, client):
        for bad_id in ("abc", "0", "-5"):
            response = client.get(f"/api/v1/books/{bad_id}/reader")
            assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_get_reader_id_too_large(self, client):
        response = client.get("/api/v1/books/99999999999999999999/reader")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

class TestBooksWithReaders:
    """Tests for GET /api/v1/books/readers endpoint."""

    def test_list_borrowed_books_with_readers(
        self, client, library, multiple_books, sample_reader, second_reader
    ):
        first, second, _ = multiple_books
        library.borrow_book(f"{first.id}/{sample_reader.id}")
        library.borrow_book(f"{second.id}/{second_reader.id}")

        response = client.get("/api/v1/books/readers")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 2
        # Newest book first
        assert data[0]["id"] == second.id
        assert data[0]["reader"] == {"id": second_reader.id, "name": "Yevhenii"}
        assert data[1]["id"] == first.id
        assert data[1]["name"] == first.name
        assert data[1]["author"] == first.author
        assert data[1]["reader"] == {"id": sample_reader.id, "name": "Jonny"}

    def test_list_borrowed_books_none_borrowed(self, client, sample_book):
        response = client.get("/api/v1/books/readers")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_borrowed_books_missing_reader(self, client, db_session):
        db_session.add(Book(name="Orphan", author="Nobody", reader_id=777))
        db_session.commit()

        response = client.get("/api/v1/books/readers")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "This Reader ID doesn't exist!"


class TestBorrowBook:
    """Tests for POST /api/v1/books/{book_id}/readers/{reader_id} endpoint."""

    def test_borrow_book_success(self, client, db_session, sample_book, sample_reader):
        response = client.post(
            f"/api/v1/books/{sample_book.id}/readers/{sample_reader.id}"
        )

        assert response.status_code == status.HTTP_200_OK
        db_session.refresh(sample_book)
        assert sample_book.reader_id == sample_reader.id

    def test_borrow_already_borrowed(self, client, borrowed_book, second_reader):
        response = client.post(
            f"/api/v1/books/{borrowed_book.id}/readers/{second_reader.id}"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Cannot borrow already borrowed Book!"

    def test_borrow_unknown_reader(self, client, sample_book):
        response = client.post(f"/api/v1/books/{sample_book.id}/readers/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "This Reader ID doesn't exist!"

    def test_borrow_malformed_ids(self, client, sample_book):
        response = client.post(f"/api/v1/books/{sample_book.id}/readers/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestReturnBook:
    """Tests for DELETE /api/v1/books/{book_id} endpoint."""

    def test_return_book_success(self, client, db_session, borrowed_book):
        response = client.delete(f"/api/v1/books/{borrowed_book.id}")

        assert response.status_code == status.HTTP_200_OK
        db_session.refresh(borrowed_book)
        assert borrowed_book.reader_id is None

    def test_return_book_keeps_book(self, client, borrowed_book):
        """Returning only clears the link; the book stays in the catalogue."""
        client.delete(f"/api/v1/books/{borrowed_book.id}")

        response = client.get("/api/v1/books")
        assert [b["id"] for b in response.json()] == [borrowed_book.id]

    def test_return_available_book(self, client, sample_book):
        response = client.delete(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "already in the Library" in response.json()["detail"]

    def test_return_unknown_book(self, client):
        response = client.delete("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_return_id_too_large(self, client):
        response = client.delete("/api/v1/books/99999999999999999999")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_borrow_id_too_large(self, client, sample_reader):
        response = client.post(
            f"/api/v1/books/99999999999999999999/readers/{sample_reader.id}"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
