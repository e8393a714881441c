"""Command-line surface for the todo note tools.

``todo rename [PATH]`` renames ``*.todo.md`` notes after the title on their
first line. PATH may be a single note or a directory (not recursive) and
defaults to the current directory. Exit code is 1 when any file failed or
the target is invalid, 0 otherwise (skips never count as failures).
"""
import logging
import os
import sys
from typing import Optional
import click
from models import RenameResult
from renamer import InvalidTargetError, Renamer, TargetAccessError
from theme import color, status_color, BOLD

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _configure_logging(verbose: bool) -> None:
    # Debug on with --verbose or TODO_RENAME_DEBUG=1
    debug = verbose or _truthy_env(os.getenv("TODO_RENAME_DEBUG"), False)
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)


@click.group()
def cli() -> None:
    """Tools for Markdown todo notes."""


@cli.command()
@click.argument("path", required=False, default=".")
@click.option("--dry-run", "-n", is_flag=True, help="Show what would be renamed without renaming.")
@click.option("--quiet", "-q", is_flag=True, help="Only report renamed and failed files.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def rename(ctx: click.Context, path: str, dry_run: bool, quiet: bool, verbose: bool) -> None:
    """Rename *.todo.md notes after their '# [ ] Title' first line.

    PATH is a note or a directory of notes (default: current directory).
    Existing files are never overwritten.
    """
    _configure_logging(verbose)

    def report(result: RenameResult) -> None:
        if quiet and result.status == "skipped":
            return
        click.echo(status_color(result.message(), result.status))

    renamer = Renamer(dry_run=dry_run, on_result=report)
    try:
        summary = renamer.run(path)
    except InvalidTargetError as exc:
        click.echo(color(f"Error: {exc}", BOLD), err=True)
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)
    except TargetAccessError as exc:
        click.echo(color(f"Error: {exc}", BOLD), err=True)
        ctx.exit(1)
    click.echo(str(summary))
    ctx.exit(summary.exit_code)


def main() -> None:
    cli()


if __name__ == '__main__':  # pragma: no cover
    main()
