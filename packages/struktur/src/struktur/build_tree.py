"""
struktur - writes a directory tree of the folder it runs from.

The listing goes to ``struktur.txt`` next to the program:

    tools/
    ├── bin/
    │   └── helper.sh
    ├── docs/
    └── notes.txt

Directories come before files and names sort case-insensitively. The
program itself and ``struktur.txt`` are left out. Unreadable folders show
up as ``[Access denied]`` or ``[Error: ...]`` lines. Anything that stops
the run is written to ``struktur-error.txt`` and the exit status is 1.

Usage (CLI):
    struktur

Usage (library):
    from struktur.build_tree import build_tree
    text = build_tree("/path/to/dir")
"""

import logging
import os
import sys
import traceback
from pathlib import Path

from struktur.components.entry import IgnoreSet
from struktur.components.scanner import list_entries, render_entries
from struktur.config import ERROR_NAME, Settings

logger = logging.getLogger(__name__)


def build_tree(root: str | os.PathLike, ignore: IgnoreSet | None = None) -> str:
    """Render the tree below *root* as newline-terminated text."""
    ignore = ignore if ignore is not None else IgnoreSet()
    root = os.path.abspath(root)
    lines = [f"{os.path.basename(root)}{os.sep}"]

    try:
        entries = list_entries(root)
    except OSError as exc:
        logger.warning("Could not read root %s: %s", root, exc)
        lines.append(f"[Error reading root: {exc}]")
    else:
        render_entries(root, entries, lines, "", ignore)

    return "".join(line + "\n" for line in lines)


def write_output(text: str, path: str | os.PathLike) -> None:
    """
    Overwrite *path* with *text* as UTF-8 without a byte-order mark.

    Undecodable file names arrive from ``os.listdir`` as lone surrogates;
    they are written as ``?`` instead of failing the run.
    """
    with open(path, "w", encoding="utf-8", errors="replace", newline="") as f:
        f.write(text)


def write_error(error: BaseException, path: str | os.PathLike) -> bool:
    """Best-effort error report. Returns False if even that could not be written."""
    report = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    try:
        write_output(f"An error occurred: {report}", path)
    except Exception as exc:
        logger.error("Could not write error report to %s: %s", path, exc)
        return False
    return True


def main(settings: Settings | None = None) -> int:
    error_path = Path.cwd() / ERROR_NAME
    try:
        settings = settings or Settings.from_runtime()
        error_path = settings.error_path
        text = build_tree(settings.root, IgnoreSet(settings.ignore_names))
        write_output(text, settings.output_path)
    except Exception as exc:
        logger.exception("Tree could not be written")
        write_error(exc, error_path)
        return 1

    logger.info("Tree written to %s", settings.output_path)
    return 0


def run() -> None:
    """CLI entrypoint used by the `struktur` script."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(main())


if __name__ == "__main__":
    run()
