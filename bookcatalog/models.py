# bookcatalog/models.py
import re
from typing import Any

from pydantic import BaseModel

from .catalog.schemas import Book


# ASCII digits only: no "1_965", no full-width or Arabic-Indic digits.
_YEAR_TEXT = re.compile(r"[+-]?[0-9]+")


def parse_year(value: Any) -> int:
    """Parse the form's year field; any failure raises ``ValueError``."""
    # bool is an int subclass, but a checkbox is not a year
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _YEAR_TEXT.fullmatch(text):
            return int(text)
    raise ValueError(f"not a year: {value!r}")


class BookForm(BaseModel):
    """Raw input from the Add Book form.

    ``year`` is accepted as whatever the client sent (text, number,
    ``null`` ...) so that parsing happens in ``to_book`` and every bad
    value ends up as the same ``ValueError``.
    """

    title: str = ""
    author: str = ""
    genre: str = ""
    year: Any = ""

    def to_book(self) -> Book:
        return Book(title=self.title, author=self.author, genre=self.genre, year=parse_year(self.year))


class RemoveResult(BaseModel):
    title: str
    removed: bool
    message: str
