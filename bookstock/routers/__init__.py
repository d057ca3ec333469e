"""API routers package."""
from . import books, errors

__all__ = ["books", "errors"]
