"""Playlist entries and helpers for reading numbers and titles from file names."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from tunedeck.hashing import generate

_NUMBER_PATTERN = re.compile(r"^\s*[\(\[]?(\d+)[\)\]]?[\s\-_:]*", re.ASCII)
_NAME_PATTERN = re.compile(r"\(\d+\)\s(.+)", re.ASCII)
_TRIM_CHARS = " \t\n\r"


@dataclass(frozen=True)
class Song:
    """A song in the playlist; ``id`` is derived from number, name and path."""

    number: int
    name: str
    path: str
    id: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", generate(f"{self.number}{self.name}{self.path}"))

    def matches(self, query: str) -> bool:
        """Return True if ``query`` occurs in the song's name (case-sensitive)."""
        return query in self.name


def extract_number(name: str) -> int:
    """Return the leading track number of ``name``, or 0 if there is none.

    Accepts forms such as ``"12 Title"``, ``"(12) Title"``, ``"[12] - Title"``.
    """
    found = _NUMBER_PATTERN.search(name)
    return int(found.group(1)) if found else 0


def extract_name(name: str) -> str:
    """Return the title of ``name`` with a leading ``"(N) "`` prefix removed, trimmed."""
    found = _NAME_PATTERN.fullmatch(name)
    title = found.group(1) if found else name
    return title.strip(_TRIM_CHARS)