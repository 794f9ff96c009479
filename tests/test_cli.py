"""End-to-end tests for the command line front end against a temporary SQLite file."""

import json

import pytest

from agenda.config import Settings
from cli.__main__ import main


@pytest.fixture
def run(tmp_path, capsys):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'agenda.db'}", log_level="WARNING")

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(list(argv), settings=settings)
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


def test_add_list_search_and_show(run):
    assert run("add", "--name", "Ana", "--phone", "555", "--group", "1", "--group", "2")[0] == 0
    assert run("add", "--name", "Bob", "--phone", "666", "--category", "2")[0] == 0

    code, out, _ = run("list")
    assert code == 0
    assert out.index("Ana") < out.index("Bob")

    code, out, _ = run("search", "66")
    assert "Bob" in out and "Ana" not in out

    code, out, _ = run("list", "--category", "2")
    assert "Bob" in out and "Ana" not in out

    code, out, _ = run("show", "1")
    assert code == 0
    assert "Groups: Group 1, Group 2" in out


def test_add_invalid_contact_fails(run):
    code, _, err = run("add", "--name", " ", "--phone", "555")
    assert code == 1
    assert "Name is required" in err


def test_backup_restore_and_export(run, tmp_path):
    run("add", "--name", "Ana", "--phone", "555", "--email", "a@b.com", "--linkedin", "ana")
    backup = tmp_path / "backup.json"
    assert run("backup", str(backup))[0] == 0
    assert [c["name"] for c in json.loads(backup.read_text(encoding="utf-8"))] == ["Ana"]

    assert run("restore", str(backup))[0] == 0
    code, out, _ = run("list")
    assert out.count("Ana") == 2

    cards = tmp_path / "contacts.vcf"
    assert run("export", str(cards))[0] == 0
    assert cards.read_text(encoding="utf-8").count("BEGIN:CARD") == 2


def test_restore_bad_file_is_noop(run, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    code, _, err = run("restore", str(bad))
    assert code == 1
    assert "Nothing restored" in err
    assert "No contacts." in run("list")[1]


def test_import_csv(run, tmp_path):
    book = tmp_path / "book.csv"
    book.write_text("name,phone\nAna,555 1\nAna again,5551\n", encoding="utf-8")
    code, out, _ = run("import", str(book))
    assert code == 0
    assert "Imported 1 contacts." in out


def test_delete_and_missing_contact(run):
    run("add", "--name", "Ana", "--phone", "555")
    assert run("delete", "1")[0] == 0
    code, _, err = run("delete", "1")
    assert code == 1
    assert "No contact with id 1" in err


def test_groups_and_categories(run):
    assert run("group-add", "Climbing")[0] == 0
    assert "Climbing" in run("groups")[1]
    assert run("category-delete", "4")[0] == 0
    assert "General" not in run("categories")[1]


def test_website_action_opens_url(run, monkeypatch):
    opened = []
    monkeypatch.setattr("webbrowser.open", opened.append)
    run("add", "--name", "Ana", "--phone", "555", "--website", "ana.dev")
    assert run("website", "1")[0] == 0
    assert opened == ["https://ana.dev"]
