"""Tests for result types and batch aggregation."""
from pathlib import Path

import pytest

from models import BatchSummary, RenameResult


def _summary(*statuses):
    summary = BatchSummary()
    for i, status in enumerate(statuses):
        summary.add(RenameResult(status=status, source=Path(f"{i}.todo.md"), reason="r"))
    return summary


@pytest.mark.parametrize("statuses, code", [
    ((), 0),
    (("skipped", "skipped"), 0),
    (("renamed", "skipped"), 0),
    (("renamed", "failed", "skipped"), 1),
    (("failed", "renamed"), 1),
])
def test_exit_code_depends_only_on_failures(statuses, code):
    assert _summary(*statuses).exit_code == code
    assert _summary(*reversed(statuses)).exit_code == code


def test_counts_and_text():
    summary = _summary("renamed", "renamed", "skipped", "failed")
    assert (summary.renamed, summary.skipped, summary.failed) == (2, 1, 1)
    assert str(summary) == "Renamed 2, skipped 1, failed 1."
    summary.dry_run = True
    assert str(summary).startswith("Would rename 2")


def test_messages():
    src = Path("notes/plan.todo.md")
    assert RenameResult.renamed(src, Path("notes/a.todo.md")).message() == "Renamed notes/plan.todo.md -> a.todo.md"
    assert RenameResult.renamed(src, Path("notes/a.todo.md"), dry_run=True).message().startswith("Would rename")
    assert RenameResult.skipped(src, "no title line").message() == "Skipped notes/plan.todo.md: no title line"
    failed = RenameResult.failed(src, "file not found")
    assert failed.is_failure
    assert failed.message() == "Error: notes/plan.todo.md: file not found"
