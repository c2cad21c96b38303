"""Tests for command-line recall."""

from src.interface.history import CommandHistory


def test_empty_history():
    history = CommandHistory()

    assert history.previous() is None
    assert history.next() is None


def test_walk_back_and_forward():
    history = CommandHistory()
    for line in ("NAV 5 4", "TOR 3 1", "PHA 700"):
        history.push(line)

    assert history.previous() == "PHA 700"
    assert history.previous() == "TOR 3 1"
    assert history.previous() == "NAV 5 4"
    assert history.previous() == "NAV 5 4"  # clamps at oldest

    assert history.next() == "TOR 3 1"
    assert history.next() == "PHA 700"
    assert history.next() == ""
    assert history.next() == ""


def test_push_resets_cursor_and_skips_blank():
    history = CommandHistory()
    history.push("SRS")
    history.previous()
    history.push("   ")
    history.push("STATUS")

    assert history.entries == ["SRS", "STATUS"]
    assert history.previous() == "STATUS"
