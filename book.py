from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class AlreadyCheckedOut(Exception):
    """Raised when a checkout is attempted on a book that is already out."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'The book "{title}" is already checked out.')


class Book:
    """Represents a single book item in the catalog.

    Only the availability flag changes after construction, and only through
    checkout/return.
    """

    def __init__(self, title: str, author: str, genre: str) -> None:
        self._title = title.strip()
        self._author = author.strip()
        self._genre = genre.strip()
        self._available = True

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def genre(self) -> str:
        return self._genre

    @property
    def available(self) -> bool:
        return self._available

    def checkout(self) -> None:
        if not self._available:
            logger.info("Rejected checkout of %r: already checked out", self._title)
            raise AlreadyCheckedOut(self._title)
        self._available = False
        logger.debug("Checked out %r", self._title)

    def force_checkout(self) -> None:
        """Mark the book as checked out without checking availability.

        Administrative override; the shell never calls it.
        """
        self._available = False
        logger.debug("Force checked out %r", self._title)

    def return_book(self) -> None:
        self._available = True
        logger.debug("Returned %r", self._title)

    def describe(self) -> str:
        status = "Available" if self._available else "Checked Out"
        return f'"{self._title}" by {self._author} ({self._genre}) [{status}]'

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Book(title={self._title!r}, author={self._author!r}, genre={self._genre!r})"

    def to_dict(self) -> dict:
        return {"title": self._title, "author": self._author, "genre": self._genre, "available": self._available}
