import pytest

from bookcatalog import cli
from bookcatalog.catalog import CatalogStore
from bookcatalog.config import Settings


class ScriptedInput:
    """Feeds canned answers to ``input_fn``; raises EOFError when exhausted."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def run(store, answers):
    out = []
    feed = ScriptedInput(answers)
    cli.run_cli(store, input_fn=feed, output_fn=out.append)
    return out, feed


def test_quit_immediately(seeded_store):
    out, _ = run(seeded_store, ["q"])
    assert out == [cli.MENU]


def test_add_book(store):
    out, feed = run(store, ["1", "Foo", "Bar", "SciFi", "2020", "q"])
    assert "✅ Book added successfully!" in out
    assert store.search_by_author("bar")[0].year == 2020
    assert feed.prompts[1:5] == ["Title: ", "Author: ", "Genre: ", "Publication Year: "]


def test_add_book_invalid_year(store):
    out, _ = run(store, ["1", "Foo", "Bar", "SciFi", "soon", "q"])
    assert "❌ Invalid input!" in out
    assert len(store) == 0


def test_remove_book(seeded_store):
    out, _ = run(seeded_store, ["2", "DUNE", "2", "DUNE", "q"])
    assert out.count("✅ Book removed") == 1
    assert out.count("❌ Book not found") == 1
    assert len(seeded_store) == 3


def test_search_books(seeded_store):
    out, _ = run(seeded_store, ["3", "mystery", "3", "nothing", "q"])
    assert (
        "Title: And Then There Were None | Author: Agatha Christie | Genre: Mystery | Year: 1939\n"
        "Title: Harry Potter | Author: J.K. Rowling | Genre: mystery | Year: 1997"
    ) in out
    assert "❌ No results found!" in out


def test_view_all_empty(store):
    out, _ = run(store, ["4", "q"])
    assert "📭 No books in catalog." in out


def test_view_all(seeded_store):
    out, _ = run(seeded_store, ["4", "quit"])
    listing = [o for o in out if o.startswith("Title: Dune")]
    assert len(listing) == 1
    assert len(listing[0].splitlines()) == 4


def test_unknown_option(store):
    out, _ = run(store, ["9", "q"])
    assert "Unknown option: 9" in out


def test_eof_ends_loop(store):
    out, _ = run(store, [])
    assert out == [cli.MENU]


def test_eof_mid_form_ends_loop(store):
    run(store, ["1", "Foo"])
    assert len(store) == 0


def test_main_seeds_store(monkeypatch):
    seen = {}

    def fake_run_cli(store):
        seen["store"] = store

    monkeypatch.setattr(cli, "run_cli", fake_run_cli)
    cli.main(Settings(seed_on_startup=True))
    assert isinstance(seen["store"], CatalogStore)
    assert len(seen["store"]) == 4


@pytest.mark.parametrize("flag, expected", [(True, 4), (False, 0)])
def test_main_respects_seed_flag(monkeypatch, flag, expected):
    seen = {}
    monkeypatch.setattr(cli, "run_cli", lambda store: seen.setdefault("n", len(store)))
    cli.main(Settings(seed_on_startup=flag))
    assert seen["n"] == expected
