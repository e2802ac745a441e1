"""Text-file utilities and fixed-size binary stores for books, accounts and employees."""

__version__ = "0.1.0"
__all__ = ["textfiles", "books", "bank", "employees"]