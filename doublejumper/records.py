"""High-score records and their JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

log = logging.getLogger(__name__)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _read_array(path: Path) -> list[Any] | None:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, list) else None


@dataclass
class Record:
    """One finished game. Records are ordered by score alone."""

    player_name: str = ""
    record_date: str = ""
    score: int = 0

    def __lt__(self, other: Record) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.score < other.score

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "playerName": self.player_name, "recordDate": self.record_date}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Record:
        """Build a record; missing or mistyped fields fall back to 0 or ''."""
        return cls(
            player_name=_as_str(data.get("playerName")),
            record_date=_as_str(data.get("recordDate")),
            score=_as_int(data.get("score")),
        )

    def save(self, path: str | Path) -> None:
        """Append this record to the JSON array stored at ``path``."""
        path = Path(path)
        entries = _read_array(path) or []
        entries.append(self.to_dict())
        path.write_text(json.dumps(entries, indent=4) + "\n", encoding="utf-8")


class RecordDatabase:
    """The records kept in one file, at most one per score."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._by_score: dict[int, Record] = {}
        self.load()

    def load(self) -> None:
        """Reload from the file; an unreadable or malformed file is ignored."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            log.warning("Could not open %s", self.path)
            return
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            data = None
        if not isinstance(data, list):
            log.warning("Invalid JSON format in %s", self.path)
            return
        self._by_score.clear()
        for entry in data:
            if isinstance(entry, dict):
                record = Record.from_dict(entry)
                self._by_score.setdefault(record.score, record)

    @property
    def records(self) -> list[Record]:
        """Records in ascending order of score."""
        return [self._by_score[score] for score in sorted(self._by_score)]

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __reversed__(self) -> Iterator[Record]:
        return reversed(self.records)

    def __len__(self) -> int:
        return len(self._by_score)

    def insert(self, record: Record) -> bool:
        """Store ``record`` unless one with the same score exists."""
        if record.score in self._by_score:
            return False
        record.save(self.path)
        self._by_score[record.score] = record
        return True

    def reset(self) -> None:
        """Empty the file and forget every record."""
        self.path.write_text("", encoding="utf-8")
        self._by_score.clear()