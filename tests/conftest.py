"""Shared fixtures for the todo renamer tests."""
import os
import sys

# src/ holds top-level modules, not a package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest


@pytest.fixture
def make_note(tmp_path):
    """Create a note under tmp_path with the given first line."""
    def _make(name, first_line, body="- item\n", directory=None):
        target_dir = directory or tmp_path
        path = target_dir / name
        path.write_text(first_line + "\n" + body, encoding="utf-8")
        return path
    return _make
