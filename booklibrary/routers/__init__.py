"""
API Routers Package

Router Structure:
- books.py: /api/v1/books/* endpoints (catalogue, borrow, return)
- readers.py: /api/v1/readers/* endpoints

Each router is imported and registered in main.py.
"""

from booklibrary.routers.books import router as books_router
from booklibrary.routers.readers import router as readers_router

__all__ = [
    "books_router",
    "readers_router",
]
