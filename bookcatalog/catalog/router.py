"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET    /books              : list books (insertion order, or sorted)
- POST   /books              : add a book from the Add Book form fields
- DELETE /books?title=       : remove every book with that title
- GET    /search?q=          : merged title/author/genre search
- GET    /search/{field}?q=  : one predicate (title, author or genre)
- GET    /report             : all books as plain text
- GET    /search/report?q=   : merged search as plain text
- GET    /reports/{field}    : books grouped by genre or author
- GET    /reports/{field}/text : the same groups as plain text
- GET    /duplicates         : first book with the same title and author

The store is never imported here; each request gets the instance held
on ``app.state.store``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import PlainTextResponse
from typing_extensions import Literal

from ..models import BookForm, RemoveResult
from . import render
from .schemas import Book, GroupedBooks
from .store import CatalogStore


logger = logging.getLogger(__name__)

SortField = Literal["title", "author", "genre", "year"]
SortOrder = Literal["asc", "desc"]
GroupField = Literal["genre", "author"]

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


@router.get("/books", response_model=List[Book])
def list_books(
    sort: Optional[SortField] = Query(default=None, description="Sort field; insertion order when omitted"),
    order: SortOrder = Query(default="asc", description="Sort direction"),
    store: CatalogStore = Depends(get_store),
) -> List[Book]:
    if sort is None:
        return list(store.get_all())
    return list(store.sorted_by(sort, descending=(order == "desc")))


@router.post("/books", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_book(form: BookForm, store: CatalogStore = Depends(get_store)) -> Book:
    try:
        book = form.to_book()
    except ValueError:
        logger.info("Rejected book form with year %r", form.year)
        raise HTTPException(status_code=400, detail=render.INVALID_INPUT)
    store.add(book)
    return book


@router.delete("/books", response_model=RemoveResult)
def remove_book(
    title: str = Query(..., description="Title to remove (case-insensitive, exact)"),
    store: CatalogStore = Depends(get_store),
) -> RemoveResult:
    removed = store.remove(title)
    if not removed:
        raise HTTPException(status_code=404, detail=render.BOOK_NOT_FOUND)
    return RemoveResult(title=title, removed=True, message=render.remove_message(removed))


@router.get("/search", response_model=List[Book])
def search_books(
    q: str = Query(default="", description="Matches title or author substrings, or the exact genre"),
    store: CatalogStore = Depends(get_store),
) -> List[Book]:
    return list(store.search(q))


@router.get("/search/report", response_class=PlainTextResponse)
def search_report(q: str = Query(default=""), store: CatalogStore = Depends(get_store)) -> str:
    return render.format_search_results(store.search(q))


@router.get("/search/title", response_model=List[Book])
def search_by_title(q: str = Query(default=""), store: CatalogStore = Depends(get_store)) -> List[Book]:
    return list(store.search_by_title(q))


@router.get("/search/author", response_model=List[Book])
def search_by_author(q: str = Query(default=""), store: CatalogStore = Depends(get_store)) -> List[Book]:
    return list(store.search_by_author(q))


@router.get("/search/genre", response_model=List[Book])
def search_by_genre(q: str = Query(default=""), store: CatalogStore = Depends(get_store)) -> List[Book]:
    return list(store.search_by_genre(q))


@router.get("/report", response_class=PlainTextResponse)
def report(store: CatalogStore = Depends(get_store)) -> str:
    """All books, one per line, as shown on the View All Books screen."""
    return render.format_books(store.get_all())


@router.get("/reports/{field}", response_model=GroupedBooks)
def grouped_report(field: GroupField, store: CatalogStore = Depends(get_store)) -> GroupedBooks:
    return GroupedBooks(field=field, groups=store.group_by(field))


@router.get("/reports/{field}/text", response_class=PlainTextResponse)
def grouped_report_text(field: GroupField, store: CatalogStore = Depends(get_store)) -> str:
    return render.format_groups(store.group_by(field))


@router.get("/duplicates", response_model=Book)
def find_duplicate(
    title: str = Query(...),
    author: str = Query(...),
    store: CatalogStore = Depends(get_store),
) -> Book:
    book = store.find_duplicate(title, author)
    if book is None:
        raise HTTPException(status_code=404, detail=render.BOOK_NOT_FOUND)
    return book
