"""Tests for palette configuration helpers."""
from theme import normalize_hex, parse_env_file, resolve_hex


def test_normalize_hex():
    assert normalize_hex("#A7E399") == "#A7E399"
    assert normalize_hex("a7e399") == "#a7e399"
    assert normalize_hex("#zzzzzz") is None
    assert normalize_hex("#123") is None


def test_parse_env_file_keeps_only_valid_palette_keys():
    text = "\n".join([
        "# comment",
        "TODO_RENAME_OK=#112233",
        "TODO_RENAME_FAIL = 445566",
        "TODO_RENAME_SKIP=not-a-color",
        "OTHER=#778899",
        "garbage line",
    ])
    assert parse_env_file(text) == {"TODO_RENAME_OK": "#112233", "TODO_RENAME_FAIL": "#445566"}


def test_resolve_priority():
    overrides = {"TODO_RENAME_OK": "#111111"}
    assert resolve_hex("TODO_RENAME_OK", "#000000", {"TODO_RENAME_OK": "#222222"}, overrides) == "#222222"
    assert resolve_hex("TODO_RENAME_OK", "#000000", {}, overrides) == "#111111"
    assert resolve_hex("TODO_RENAME_OK", "#000000", {"TODO_RENAME_OK": "bad"}, overrides) == "#111111"
    assert resolve_hex("TODO_RENAME_SKIP", "#000000", {}, overrides) == "#000000"
