"""Title line parsing and slug generation.

A todo note starts with a checkbox heading such as ``# [ ] Buy milk`` or
``# [x] Done``. The character inside the brackets is not checked; any single
character is accepted as the marker.
"""
from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

TITLE_RE = re.compile(r"^# \[(.)\] (.*)$")
SLUG_INVALID_RE = re.compile(r"[^a-zA-Z0-9_-]")
TODO_SUFFIX = ".todo.md"


def extract_title(line: str) -> Optional[str]:
    """Return the raw (untrimmed) title from a heading line, or None."""
    match = TITLE_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    return match.group(2)


def sanitize_title(raw: str) -> Optional[str]:
    """Turn a raw title into a lowercase slug of [a-z0-9_-].

    Returns None when nothing usable is left, either right after trimming
    or after invalid characters have been removed.
    """
    title = raw.strip(" \t")
    if not title:
        return None
    slug = SLUG_INVALID_RE.sub("", title.replace(" ", "_")).lower()
    if not slug:
        logger.debug("title %r sanitized to an empty slug", raw)
        return None
    return slug


def slug_filename(slug: str) -> str:
    return f"{slug}{TODO_SUFFIX}"


def read_first_line(path: Path) -> str:
    """Read only the first line of a text file (UTF-8, bad bytes replaced)."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.readline()
