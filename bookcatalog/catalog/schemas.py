"""
Pydantic schema definitions for the catalog module.

The ``Book`` model captures the four fields a catalogue entry carries:
title, author, genre and publication year. Books are frozen once
constructed; the store only ever adds or removes whole records, it
never edits one in place.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A single book entry.

    ``title`` is the only handle clients have on a record (removal is by
    title), but titles are not unique. ``genre`` is free text such as
    ``"Magical Realism, Literary Fiction"``; it is compared as a whole,
    never split. ``year`` is not range checked.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    genre: str
    year: int

    def __str__(self) -> str:
        return (
            f"Title: {self.title} | Author: {self.author} | "
            f"Genre: {self.genre} | Year: {self.year}"
        )


class GroupedBooks(BaseModel):
    """Books grouped under the distinct values of one field."""

    field: str
    groups: Dict[str, List[Book]]
