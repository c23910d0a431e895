"""Bookstore

An in-memory bookstore library: a catalog of books that users can search,
purchase and review, and a directory of registered users.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
