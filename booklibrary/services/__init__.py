"""
Services Package

Business logic kept separate from HTTP handling (routers) so the API and
the console share it.

Current services:
- lending.py: Available / Borrowed lending status
- library.py: LibraryService, reader/book queries and borrow/return rules
- validator.py: Input checks for ids, names and combined "a/b" inputs
"""
