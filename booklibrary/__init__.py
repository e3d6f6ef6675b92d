"""
Book Library API

A small library-management backend: readers, books, and who currently
holds which book.
"""

__version__ = "1.0.0"
