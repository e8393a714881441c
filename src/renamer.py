"""Renamer logic: candidate discovery, per-file rename, and dispatch.

Per-file problems never raise. They come back as RenameResult values so a
directory batch always runs to the end; only an unusable top-level target
raises (InvalidTargetError, or TargetAccessError for an unlistable
directory).
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Union
from models import BatchSummary, RenameResult
from titles import TODO_SUFFIX, extract_title, read_first_line, sanitize_title, slug_filename

logger = logging.getLogger(__name__)

SUFFIX = TODO_SUFFIX

PathLike = Union[str, "os.PathLike[str]"]
ResultCallback = Callable[[RenameResult], None]


class InvalidTargetError(Exception):
    """Target argument is neither a regular file nor a directory."""

    def __init__(self, target: str):
        super().__init__(f"invalid target: {target}")
        self.target = target


class TargetAccessError(Exception):
    """Target directory exists but could not be listed."""

    def __init__(self, target: str, reason: str):
        super().__init__(f"cannot read directory {target}: {reason}")
        self.target = target


class Renamer:
    def __init__(self, dry_run: bool = False, on_result: Optional[ResultCallback] = None):
        self.dry_run: bool = dry_run
        self.on_result: Optional[ResultCallback] = on_result

    # -------------------- dispatch --------------------
    def run(self, target: PathLike = ".") -> BatchSummary:
        """Rename a single file or every candidate directly inside a directory."""
        raw = os.fspath(target)
        if raw and os.path.isdir(raw):
            return self.rename_directory(raw)
        if raw and os.path.isfile(raw):
            summary = BatchSummary(dry_run=self.dry_run)
            self._record(summary, self.rename_file(raw))
            return summary
        raise InvalidTargetError(raw)

    def rename_directory(self, directory: PathLike) -> BatchSummary:
        summary = BatchSummary(dry_run=self.dry_run)
        try:
            paths = self.candidates(directory)
        except OSError as exc:
            raise TargetAccessError(os.fspath(directory), exc.strerror or str(exc)) from exc
        for path in paths:
            self._record(summary, self.rename_file(path))
        logger.debug("batch %s done: %s", directory, summary)
        return summary

    def _record(self, summary: BatchSummary, result: RenameResult) -> None:
        summary.add(result)
        if self.on_result is not None:
            self.on_result(result)

    # -------------------- discovery --------------------
    def candidates(self, directory: PathLike) -> List[Path]:
        """Regular files named *.todo.md directly inside directory.

        Subdirectories and symlinks are ignored; order is whatever the
        filesystem returns.
        """
        found: List[Path] = []
        with os.scandir(directory) as it:
            for entry in it:
                if not entry.name.endswith(SUFFIX):
                    continue
                if not entry.is_file(follow_symlinks=False):
                    logger.debug("ignoring non-regular entry %s", entry.path)
                    continue
                found.append(Path(entry.path))
        logger.debug("found %d candidate(s) in %s", len(found), directory)
        return found

    # -------------------- single file --------------------
    def rename_file(self, path: PathLike) -> RenameResult:
        source = Path(path)
        if not source.name.endswith(SUFFIX):
            return RenameResult.skipped(source, f"not a {SUFFIX} file")
        if not source.is_file():
            return RenameResult.failed(source, "file not found")

        try:
            first_line = read_first_line(source)
        except OSError as exc:
            return RenameResult.failed(source, f"cannot read file ({exc.strerror or exc})")

        raw_title = extract_title(first_line)
        if raw_title is None:
            logger.debug("no title line in %s: %r", source, first_line)
            return RenameResult.skipped(source, "no title line")
        slug = sanitize_title(raw_title)
        if slug is None:
            return RenameResult.skipped(source, "empty title")

        target = source.parent / slug_filename(slug)
        if target == source:
            return RenameResult.skipped(source, "already correctly named", target)
        case_only = self._is_case_only_rename(source, target)
        if os.path.lexists(target) and not case_only:
            return RenameResult.failed(source, f"target already exists: {target.name}", target)

        if self.dry_run:
            return RenameResult.renamed(source, target, dry_run=True)
        try:
            if case_only:
                os.rename(source, target)
            else:
                self._move_no_clobber(source, target)
        except FileExistsError:
            return RenameResult.failed(source, f"target already exists: {target.name}", target)
        except OSError as exc:
            return RenameResult.failed(source, f"rename failed ({exc.strerror or exc})", target)
        logger.debug("renamed %s -> %s", source, target)
        return RenameResult.renamed(source, target)

    @staticmethod
    def _move_no_clobber(source: Path, target: Path) -> None:
        """Link then unlink; link() refuses an existing target."""
        try:
            os.link(source, target, follow_symlinks=False)
        except FileExistsError:
            raise
        except (OSError, NotImplementedError) as exc:
            # no hard links on this filesystem
            logger.debug("hard link %s -> %s unavailable (%s); using rename", source, target, exc)
            if os.path.lexists(target):
                raise FileExistsError(str(target)) from exc
            os.rename(source, target)
            return
        try:
            os.unlink(source)
        except OSError:
            os.unlink(target)
            raise

    @staticmethod
    def _is_case_only_rename(source: Path, target: Path) -> bool:
        # same file under a name differing only in case (case-insensitive filesystem);
        # a hard link to the source is a different name and stays a conflict
        if source.name.lower() != target.name.lower():
            return False
        if not os.path.lexists(target) or os.path.islink(target):
            return False
        try:
            return os.path.samefile(source, target)
        except OSError:
            return False
