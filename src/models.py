"""Result types for the todo renamer.

Each processed file yields one RenameResult. Status keys are plain strings
("skipped", "renamed", "failed") so they double as lookup keys for the
theme palette. Batch runs accumulate results into a BatchSummary that is
returned to the caller instead of living in module-level counters.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class RenameResult:
    """Outcome of renaming a single file.

    Fields:
        status: One of: "skipped", "renamed", "failed".
        source: Path as given by the caller.
        target: Computed destination (None when processing stopped earlier).
        reason: Why the file was skipped or failed (None on success).
        dry_run: True when the rename was only previewed.
    """
    status: str
    source: Path
    target: Optional[Path] = None
    reason: Optional[str] = None
    dry_run: bool = False

    @classmethod
    def skipped(cls, source: Path, reason: str, target: Optional[Path] = None) -> "RenameResult":
        return cls(status="skipped", source=source, target=target, reason=reason)

    @classmethod
    def renamed(cls, source: Path, target: Path, dry_run: bool = False) -> "RenameResult":
        return cls(status="renamed", source=source, target=target, dry_run=dry_run)

    @classmethod
    def failed(cls, source: Path, reason: str, target: Optional[Path] = None) -> "RenameResult":
        return cls(status="failed", source=source, target=target, reason=reason)

    @property
    def is_failure(self) -> bool:
        return self.status == "failed"

    def message(self) -> str:
        """Human-readable progress line for this result."""
        if self.status == "renamed":
            verb = "Would rename" if self.dry_run else "Renamed"
            target_name = self.target.name if self.target else "?"
            return f"{verb} {self.source} -> {target_name}"
        if self.status == "skipped":
            return f"Skipped {self.source}: {self.reason}"
        return f"Error: {self.source}: {self.reason}"

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"RenameResult(status={self.status}, source={self.source}, target={self.target})"


@dataclass
class BatchSummary:
    """Accumulated results of one invocation."""
    results: List[RenameResult] = field(default_factory=list)
    dry_run: bool = False

    def add(self, result: RenameResult) -> RenameResult:
        self.results.append(result)
        return result

    def count(self, status: str) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def renamed(self) -> int:
        return self.count("renamed")

    @property
    def skipped(self) -> int:
        return self.count("skipped")

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.is_failure)

    @property
    def ok(self) -> bool:
        # skips never affect the outcome; an empty batch is a successful no-op
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def __str__(self) -> str:
        verb = "Would rename" if self.dry_run else "Renamed"
        return f"{verb} {self.renamed}, skipped {self.skipped}, failed {self.failed}."
