"""
Plain-text rendering of catalogue results.

These helpers turn store results into the text shown by the report
endpoints and the interactive menu: one book per line, or a fixed
message when there is nothing to show.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .schemas import Book

BOOK_ADDED = "✅ Book added successfully!"
INVALID_INPUT = "❌ Invalid input!"
BOOK_REMOVED = "✅ Book removed"
BOOK_NOT_FOUND = "❌ Book not found"
NO_RESULTS = "❌ No results found!"
EMPTY_CATALOG = "📭 No books in catalog."


def format_book(book: Book) -> str:
    return str(book)


def format_books(books: Iterable[Book], empty_message: str = EMPTY_CATALOG) -> str:
    lines = [format_book(b) for b in books]
    if not lines:
        return empty_message
    return "\n".join(lines) + "\n"


def format_search_results(books: Iterable[Book]) -> str:
    return format_books(books, empty_message=NO_RESULTS)


def format_groups(groups: Dict[str, List[Book]]) -> str:
    """Render grouped books as headed sections with a count per group."""
    if not groups:
        return EMPTY_CATALOG
    parts: List[str] = []
    for key, books in groups.items():
        noun = "book" if len(books) == 1 else "books"
        parts.append(f"{key} ({len(books)} {noun})")
        parts.extend(f"  {format_book(b)}" for b in books)
    return "\n".join(parts) + "\n"


def remove_message(removed: bool) -> str:
    return BOOK_REMOVED if removed else BOOK_NOT_FOUND
