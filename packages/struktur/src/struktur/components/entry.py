from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class EntryKind(StrEnum):
    DIRECTORY = "directory"
    FILE = "file"


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY


def sort_key(entry: Entry) -> tuple[int, str, str]:
    """Directories first, then upper-cased name, ordinal name as tie-break.

    Upper-casing keeps punctuation such as ``_`` after letters.
    """
    return (0 if entry.is_dir else 1, entry.name.upper(), entry.name)


class IgnoreSet:
    """File names left out of the listing, compared case-insensitively."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(n.casefold() for n in names if n)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._names

    def hides(self, entry: Entry) -> bool:
        # directories are never filtered
        return not entry.is_dir and entry.name in self
