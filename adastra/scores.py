"""The persistent table of the best scores."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = "scores.json"
MAX_ENTRIES = 10


@dataclass(frozen=True)
class HighScoreEntry:
    """One line of the table: a pilot's name and the score reached."""

    name: str
    score: int


def _as_int(value) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _as_entry(value) -> HighScoreEntry:
    if not isinstance(value, dict):
        return HighScoreEntry("", 0)
    name = value.get("name")
    return HighScoreEntry(name if isinstance(name, str) else "", _as_int(value.get("score")))


class HighScoreTable:
    """Up to ten entries, best first, kept in a JSON file."""

    def __init__(self, path=DEFAULT_PATH):
        self.path = Path(path)
        self._entries: list[HighScoreEntry] = []

    def load(self) -> None:
        """Read the file; a missing file leaves the table as it is."""
        try:
            raw = self.path.read_bytes()
        except OSError:
            return
        try:
            data = json.loads(raw)
        except (ValueError, UnicodeDecodeError):
            data = []
        if not isinstance(data, list):
            data = []
        self._entries = [_as_entry(item) for item in data]

    def save(self) -> bool:
        """Write the table; returns False when the file cannot be written."""
        data = [{"name": e.name, "score": e.score} for e in self._entries]
        try:
            self.path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
        except OSError:
            return False
        return True

    def add(self, name: str, score: int) -> bool:
        """Record a positive score, keep the best ten and save; returns whether it was kept."""
        if score <= 0:
            return False
        self._entries.append(HighScoreEntry(name, score))
        self._entries.sort(key=lambda e: e.score, reverse=True)
        del self._entries[MAX_ENTRIES:]
        self.save()
        return True

    def entries(self) -> list[HighScoreEntry]:
        """A copy of the entries, best first."""
        return list(self._entries)