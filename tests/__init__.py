"""
Test Suite for the Book Library

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_validator.py: Input validation rules
- test_lending.py: Available / Borrowed status
- test_library_service.py: Borrow/return rules against the database
- test_books.py: /api/v1/books endpoints
- test_readers.py: /api/v1/readers endpoints
- test_repositories.py: Conditional borrow/return updates and listings
- test_config.py: Settings validation
- test_cli.py: Console commands
- test_app.py: Health, root and error handling

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
