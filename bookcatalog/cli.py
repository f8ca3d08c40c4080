"""Interactive text menu over a CatalogStore, for use without a browser."""

import logging
from typing import Callable, Optional

from .catalog import CatalogStore, render
from .config import Settings, settings as default_settings
from .logging_config import setup_logging
from .models import BookForm


logger = logging.getLogger(__name__)

MENU = (
    "📚 Book Catalog System\n"
    "  1) Add Book\n"
    "  2) Remove Book\n"
    "  3) Search Books\n"
    "  4) View All Books\n"
    "  q) Quit"
)


def _add_book(store: CatalogStore, ask: Callable[[str], str], say: Callable[[str], None]) -> None:
    form = BookForm(
        title=ask("Title: "),
        author=ask("Author: "),
        genre=ask("Genre: "),
        year=ask("Publication Year: "),
    )
    try:
        book = form.to_book()
    except ValueError:
        say(render.INVALID_INPUT)
        return
    store.add(book)
    say(render.BOOK_ADDED)


def _remove_book(store: CatalogStore, ask: Callable[[str], str], say: Callable[[str], None]) -> None:
    removed = store.remove(ask("Enter Title to Remove: "))
    say(render.remove_message(removed))


def _search_books(store: CatalogStore, ask: Callable[[str], str], say: Callable[[str], None]) -> None:
    results = store.search(ask("Search by Title/Author/Genre: "))
    say(render.format_search_results(results).rstrip("\n"))


def _view_all(store: CatalogStore, ask: Callable[[str], str], say: Callable[[str], None]) -> None:
    say(render.format_books(store.get_all()).rstrip("\n"))


ACTIONS = {
    "1": _add_book,
    "2": _remove_book,
    "3": _search_books,
    "4": _view_all,
}


def run_cli(
    store: CatalogStore,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Loop over the main menu until the user quits or input runs out."""
    logger.info("Catalog menu started with %d book(s)", len(store))
    while True:
        output_fn(MENU)
        try:
            choice = input_fn("> ").strip().lower()
            if choice in ("q", "quit"):
                break
            action = ACTIONS.get(choice)
            if action is None:
                output_fn(f"Unknown option: {choice}")
                continue
            action(store, input_fn, output_fn)
        except EOFError:
            break
    logger.info("Catalog menu closed")


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)
    store = CatalogStore()
    if settings.seed_on_startup:
        store.seed()
    run_cli(store)


if __name__ == "__main__":
    main()
