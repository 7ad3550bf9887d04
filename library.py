import logging
from typing import Dict, Iterator, List, Any

from book import Book

logger = logging.getLogger(__name__)


class BookNotFound(LookupError):
    """Raised when no book in the catalog matches a title."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'Book titled "{title}" not found.')


STARTER_BOOKS = [
    ("How to code", "Kai Johnson", "Fiction"),
    ("Rats Rats Rats", "Ezry Roukema", "Fantasy"),
    ("Musicals", "Alex Hamilton", "Non-Fiction"),
    ("Video Game", "Dylan Noriega", "Sci-Fi"),
    ("How to be a surfer", "Justin Ferrari", "Non-Fiction"),
]


class Catalog:
    """Manages the in-memory collection of books, indexed by genre."""

    def __init__(self) -> None:
        # Books live in one ordered list; the genre index holds positions into it.
        self._books: List[Book] = []
        self._genre_index: Dict[str, List[int]] = {}

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Add a pre-constructed Book. Duplicate titles are allowed."""
        self._books.append(book)
        self._genre_index.setdefault(book.genre, []).append(len(self._books) - 1)
        logger.debug("Added %r to genre %r", book.title, book.genre)

    def genre_view(self, genre: str) -> Iterator[Book]:
        """Yield the available books of a genre in insertion order.

        Availability is checked as each element is consumed. An unknown genre
        yields nothing. The iterator is single-pass; ask for a new view to
        start over.
        """
        for position in self._genre_index.get(genre, []):
            book = self._books[position]
            if book.available:
                yield book

    def find_by_title(self, title: str) -> Book:
        """Return the first book whose title matches, ignoring case."""
        wanted = title.lower()
        for book in self._iter_by_genre():
            if book.title.lower() == wanted:
                return book
        logger.info("No book titled %r", title)
        raise BookNotFound(title)

    def all_books(self) -> List[Book]:
        """All books, genre bucket by genre bucket, insertion order within each."""
        return list(self._iter_by_genre())

    def genres(self) -> List[str]:
        return list(self._genre_index)

    def get_statistics(self) -> Dict[str, Any]:
        available = sum(1 for book in self._books if book.available)
        return {
            "total_books": len(self._books),
            "available_books": available,
            "checked_out_books": len(self._books) - available,
            "genres": {genre: len(positions) for genre, positions in self._genre_index.items()},
        }

    def __iter__(self) -> Iterator[Book]:
        return self._iter_by_genre()

    def __len__(self) -> int:
        return len(self._books)

    # ------------------------- Helpers ------------------------- #
    def _iter_by_genre(self) -> Iterator[Book]:
        for positions in self._genre_index.values():
            for position in positions:
                yield self._books[position]


def seed_catalog() -> Catalog:
    """Build a catalog holding the starter books."""
    catalog = Catalog()
    for title, author, genre in STARTER_BOOKS:
        catalog.add_book(Book(title, author, genre))
    return catalog
