import logging

import pytest

from bookcatalog.catalog import render
from bookcatalog.catalog.schemas import Book
from bookcatalog.config import Settings
from bookcatalog.logging_config import setup_logging
from bookcatalog.models import BookForm, parse_year


@pytest.mark.parametrize("year", ["1965", " 1965 ", 1965])
def test_book_form_parses_year(year):
    book = BookForm(title="Dune", author="Frank Herbert", genre="Science Fiction", year=year).to_book()
    assert book == Book(title="Dune", author="Frank Herbert", genre="Science Fiction", year=1965)


@pytest.mark.parametrize(
    "year",
    ["", "nineteen", "19.65", "1965a", "1_965", "１９６５", "١٩٦٥", None, 2020.5, 2020.0, True],
)
def test_book_form_rejects_bad_year(year):
    with pytest.raises(ValueError):
        BookForm(title="Dune", year=year).to_book()


def test_parse_year_ascii_digits_only():
    assert parse_year("+1965") == 1965
    assert parse_year("\t0042\n") == 42
    assert parse_year(-300) == -300
    with pytest.raises(ValueError, match="not a year"):
        parse_year("1 965")


def test_book_form_keeps_text_fields_as_entered():
    book = BookForm(title="  Dune ", author="", genre="", year="-20").to_book()
    assert book.title == "  Dune "
    assert book.year == -20


def test_format_book():
    book = Book(title="Foo", author="Bar", genre="SciFi", year=2020)
    assert render.format_book(book) == "Title: Foo | Author: Bar | Genre: SciFi | Year: 2020"


def test_format_groups(seeded_store):
    text = render.format_groups(seeded_store.group_by("genre"))
    assert "Mystery (1 book)\n" in text
    assert text.startswith("Magical Realism, Literary Fiction (1 book)\n  Title: One Hundred")
    assert render.format_groups({}) == render.EMPTY_CATALOG


def test_remove_message():
    assert render.remove_message(True) == "✅ Book removed"
    assert render.remove_message(False) == "❌ Book not found"


def test_settings_defaults_are_overridable():
    s = Settings(title="Shelf", port=9000)
    assert s.title == "Shelf"
    assert s.port == 9000


@pytest.fixture
def catalog_logger(monkeypatch):
    logger = logging.getLogger("bookcatalog")
    monkeypatch.setattr(logger, "handlers", [])
    old_level = logger.level
    yield logger
    for h in logger.handlers:
        h.close()
    logger.setLevel(old_level)


def test_setup_logging_configures_package_logger(catalog_logger, tmp_path):
    logger = setup_logging("warning", str(tmp_path / "catalog.log"))
    assert logger is catalog_logger
    assert logger.level == logging.WARNING
    assert sorted(h.get_name() for h in logger.handlers) == ["bookcatalog.console", "bookcatalog.file"]
    assert (tmp_path / "catalog.log").exists()


def test_setup_logging_twice_does_not_stack_handlers(catalog_logger, tmp_path):
    setup_logging("INFO", str(tmp_path / "catalog.log"))
    setup_logging("debug", str(tmp_path / "catalog.log"))
    assert len(catalog_logger.handlers) == 2
    assert catalog_logger.level == logging.DEBUG


def test_setup_logging_unknown_level_means_info(catalog_logger):
    setup_logging("chatty")
    assert catalog_logger.level == logging.INFO
    assert [h.get_name() for h in catalog_logger.handlers] == ["bookcatalog.console"]
