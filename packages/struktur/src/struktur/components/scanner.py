import logging
import os

from .entry import Entry, EntryKind, IgnoreSet, sort_key

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def list_entries(path: str) -> list[Entry]:
    """Return the children of *path*, sorted directories-first. Errors from ``os.listdir`` propagate."""
    entries = []
    for name in os.listdir(path):
        is_dir = os.path.isdir(os.path.join(path, name))
        entries.append(Entry(name=name, kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE))
    return sorted(entries, key=sort_key)


def render_entries(
    path: str,
    entries: list[Entry],
    lines: list[str],
    prefix: str,
    ignore: IgnoreSet,
) -> None:
    """
    Append one line per entry of *path* to *lines*, descending into directories.

    Connectors are chosen from the full sibling list; ignored files only skip
    their own line, so a group can end on ``├── `` when its last file is hidden.
    """
    for index, entry in enumerate(entries):
        is_last = index == len(entries) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        if entry.is_dir:
            lines.append(f"{prefix}{connector}{entry.name}{os.sep}")
            render_directory(
                os.path.join(path, entry.name),
                lines,
                prefix + (SPACE if is_last else PIPE),
                ignore,
            )
        elif not ignore.hides(entry):
            lines.append(f"{prefix}{connector}{entry.name}")


def render_directory(path: str, lines: list[str], prefix: str, ignore: IgnoreSet) -> None:
    """
    Render the contents of the subdirectory *path* beneath *prefix*.

    An unreadable directory becomes a single placeholder line and its
    children are not visited.
    """
    try:
        entries = list_entries(path)
    except PermissionError:
        logger.warning("Access denied: %s", path)
        lines.append(f"{prefix}{LAST_BRANCH}[Access denied]")
        return
    except OSError as exc:
        logger.warning("Could not read %s: %s", path, exc)
        lines.append(f"{prefix}{LAST_BRANCH}[Error: {exc}]")
        return

    render_entries(path, entries, lines, prefix, ignore)
