"""The ``ym`` command: grep, set, unset, cp and mv over YAML files.

Also runnable as ``python -m ym_core.cli``.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator

import click

from .config import Settings
from .document import Document
from .errors import DocumentError, YmCoreError
from .formatting import format_hit
from .loader import load_document, read_document, write_document
from .matcher import compile_pattern
from .operations import apply_copy, apply_move, apply_set, apply_unset, search
from .walker import iter_document_files

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _reports_errors(func):
    """Turn core errors into click's ``Error: ...`` output and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except YmCoreError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _iter_documents(files: Iterable[str], settings: Settings) -> Iterator[Document]:
    """Load each candidate file lazily; unreadable files found in
    directories are skipped with a warning, named ones are fatal."""
    for candidate in iter_document_files(files, settings.extensions):
        try:
            yield read_document(candidate.path)
        except DocumentError as exc:
            if candidate.explicit:
                raise
            logger.warning("%s", exc)


def _split_assignment(item: str) -> tuple[str, str] | None:
    key, sep, raw = item.partition("=")
    if not sep:
        return None
    return key, raw


def _open_for_transfer(file: str, create: bool = False) -> Document:
    return read_document(file, missing_ok=create)


# ---------------------------------------------------------------------------
# Command group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="ym-core")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """A YAML search and patch tool."""
    settings = Settings.from_env()
    if verbose:
        settings.log_level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
        force=True,
    )
    ctx.obj = settings


@cli.command()
@click.argument("pattern")
@click.option("-R", "recursive", is_flag=True,
              help="Recursive search; always prefixes hits with their file name")
@click.argument("files", nargs=-1, type=click.Path())
@click.pass_obj
@_reports_errors
def grep(settings: Settings, pattern: str, recursive: bool, files: tuple[str, ...]) -> None:
    """Search keys by regex PATTERN (reads stdin if no FILES are given).

    Every scalar leaf whose dotted path contains a match is printed as
    ``path=value``, prefixed with ``file:`` when several files are searched.
    Directories are always searched recursively for .yaml / .yml files.
    """
    compiled = compile_pattern(pattern)

    if not files:
        documents: Iterable[Document] = [
            load_document(click.get_text_stream("stdin").read())
        ]
        show_label = False
    else:
        documents = _iter_documents(files, settings)
        show_label = recursive or len(files) > 1 or Path(files[0]).is_dir()

    # only cut lines for an interactive terminal, never for pipes
    width = settings.width if click.get_text_stream("stdout").isatty() else None
    for hit in search(compiled, documents):
        click.echo(format_hit(hit, show_label, width))


@cli.command("set")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("assignments", nargs=-1, required=True)
@click.pass_context
@_reports_errors
def set_command(ctx: click.Context, file: str, assignments: tuple[str, ...]) -> None:
    """Set KEY=VALUE pairs in FILE (values may contain '=').

    Values are typed: true/false become booleans, numeric text becomes a
    number, anything else stays a string.  Missing intermediate keys are
    created.  A scalar, list, or whole mapping sitting in the way of a key
    path is replaced, discarding what it held.
    """
    pairs = []
    failed = False
    for item in assignments:
        pair = _split_assignment(item)
        if pair is None:
            click.echo(f"Error: Invalid key=value pair: {item}", err=True)
            failed = True
            continue
        pairs.append(pair)

    if pairs:
        document = read_document(file)
        apply_set(document, pairs)
        write_document(document)

    if failed:
        ctx.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("keys", nargs=-1, required=True)
@_reports_errors
def unset(file: str, keys: tuple[str, ...]) -> None:
    """Remove KEYS (dotted paths such as database.password) from FILE.

    Mappings left empty by a removal are removed too.
    """
    document = read_document(file)
    apply_unset(document, keys)
    if document.dirty:
        write_document(document)


@cli.command()
@click.argument("source")
@click.argument("destination", required=False)
@_reports_errors
def cp(source: str, destination: str | None) -> None:
    """Copy a value from SOURCE (file.yaml:key.path) to DESTINATION.

    DESTINATION is file.yaml:key.path, file.yaml: (same key), or key.path
    / :key.path (same file).  A missing destination file is created.
    """
    for document in apply_copy(source, destination, _open_for_transfer):
        write_document(document)


@cli.command()
@click.argument("source")
@click.argument("destination", required=False)
@_reports_errors
def mv(source: str, destination: str | None) -> None:
    """Move a value from SOURCE to DESTINATION (deletes the source key).

    Takes the same arguments as cp.  The destination file is written
    before the source file.
    """
    for document in apply_move(source, destination, _open_for_transfer):
        write_document(document)


def main() -> None:
    """Console entry point (``ym``)."""
    cli(prog_name="ym")


if __name__ == "__main__":
    main()
