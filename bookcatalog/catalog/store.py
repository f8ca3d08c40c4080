"""
In-memory data store for the catalogue.

``CatalogStore`` owns the ordered list of ``Book`` records. Callers get
one instance at startup and hand it to whatever presents the catalogue
(the HTTP router or the text menu). Every read returns a tuple snapshot
so the caller cannot mutate the live list behind the store's back.

Matching rules:

* title and author searches are case-insensitive *substring* matches;
  an empty query therefore matches every record.
* genre search is a case-insensitive *exact* match on the whole genre
  text.
* removal is a case-insensitive exact match on the title and drops
  every matching record, not just the first.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .schemas import Book


logger = logging.getLogger(__name__)

SEED_BOOKS: Tuple[Book, ...] = (
    Book(title="Dune", author="Frank Herbert", genre="Science Fiction", year=1965),
    Book(
        title="One Hundred Years of Solitude",
        author="Gabriel García Márquez",
        genre="Magical Realism, Literary Fiction",
        year=1967,
    ),
    Book(title="And Then There Were None", author="Agatha Christie", genre="Mystery", year=1939),
    Book(title="Harry Potter", author="J.K. Rowling", genre="mystery", year=1997),
)

SORT_FIELDS = ("title", "author", "genre", "year")
GROUP_FIELDS = ("genre", "author")


def _fold(s: Optional[str]) -> str:
    """Lowercase a string for case-insensitive comparison.

    Unlike a search normaliser this does not strip whitespace: ``" Dune"``
    and ``"Dune"`` are different titles. Plain ``lower()``, not
    ``casefold()``: ``"STRASSE"`` does not match ``"Straße"``.
    """
    return (s or "").lower()


class CatalogStore:
    """Single-owner, single-threaded collection of books."""

    def __init__(self) -> None:
        self._books: List[Book] = []

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.get_all())

    def seed(self) -> None:
        """Append the sample records. Calling twice duplicates them."""
        self._books.extend(SEED_BOOKS)
        logger.info("Seeded catalog with %d sample books", len(SEED_BOOKS))

    def add(self, book: Book) -> None:
        self._books.append(book)
        logger.info("Added %r by %r", book.title, book.author)

    def remove(self, title: str) -> bool:
        """Remove every record whose title equals ``title`` ignoring case.

        Returns
        -------
        bool
            ``True`` if at least one record was removed.
        """
        wanted = _fold(title)
        kept = [b for b in self._books if _fold(b.title) != wanted]
        removed = len(self._books) - len(kept)
        self._books = kept
        if removed:
            logger.info("Removed %d book(s) titled %r", removed, title)
        else:
            logger.info("No book titled %r to remove", title)
        return removed > 0

    def _positions(self, predicate: Callable[[Book], bool]) -> List[int]:
        """Indices of the stored records matching ``predicate``."""
        return [i for i, b in enumerate(self._books) if predicate(b)]

    def _select(self, kind: str, query: str, predicate: Callable[[Book], bool]) -> Tuple[Book, ...]:
        results = tuple(self._books[i] for i in self._positions(predicate))
        logger.debug("%s search %r matched %d book(s)", kind, query, len(results))
        return results

    def search_by_title(self, query: str) -> Tuple[Book, ...]:
        q = _fold(query)
        return self._select("Title", query, lambda b: q in _fold(b.title))

    def search_by_author(self, query: str) -> Tuple[Book, ...]:
        q = _fold(query)
        return self._select("Author", query, lambda b: q in _fold(b.author))

    def search_by_genre(self, query: str) -> Tuple[Book, ...]:
        q = _fold(query)
        return self._select("Genre", query, lambda b: _fold(b.genre) == q)

    def search(self, query: str) -> Tuple[Book, ...]:
        """Merged title, author and genre search.

        Title matches come first, then author matches, then genre
        matches. Records are tracked by their position in the store, so
        a record already listed is not listed a second time while two
        stored copies of the same book (``seed()`` twice) both appear.
        """
        q = _fold(query)
        seen = set()
        merged: List[Book] = []
        for predicate in (
            lambda b: q in _fold(b.title),
            lambda b: q in _fold(b.author),
            lambda b: _fold(b.genre) == q,
        ):
            for i in self._positions(predicate):
                if i not in seen:
                    seen.add(i)
                    merged.append(self._books[i])
        logger.debug("Merged search %r matched %d book(s)", query, len(merged))
        return tuple(merged)

    def get_all(self) -> Tuple[Book, ...]:
        return tuple(self._books)

    def sorted_by(self, field: str, descending: bool = False) -> Tuple[Book, ...]:
        """Return a sorted snapshot; the stored order is left untouched."""
        if field not in SORT_FIELDS:
            raise ValueError(f"Cannot sort by {field!r}; expected one of {SORT_FIELDS}")
        if field == "year":
            key = lambda b: b.year  # noqa: E731
        else:
            key = lambda b: _fold(getattr(b, field))  # noqa: E731
        return tuple(sorted(self._books, key=key, reverse=descending))

    def group_by(self, field: str) -> Dict[str, List[Book]]:
        """Group books under each distinct value of ``genre`` or ``author``.

        Keys keep their exact text (``"Mystery"`` and ``"mystery"`` are
        separate groups) and are ordered alphabetically ignoring case.
        """
        if field not in GROUP_FIELDS:
            raise ValueError(f"Cannot group by {field!r}; expected one of {GROUP_FIELDS}")
        groups: Dict[str, List[Book]] = {}
        for book in self._books:
            groups.setdefault(getattr(book, field), []).append(book)
        return {k: groups[k] for k in sorted(groups, key=lambda k: (_fold(k), k))}

    def find_duplicate(self, title: str, author: str) -> Optional[Book]:
        """First record with the same title and author, ignoring case."""
        nt, na = _fold(title), _fold(author)
        return next(
            (b for b in self._books if _fold(b.title) == nt and _fold(b.author) == na),
            None,
        )
