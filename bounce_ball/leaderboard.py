"""Persistent top-5 leaderboard.

Records are stored in JSON as a list of dictionaries with keys ``name``,
``score`` and ``time`` (seconds survived).  Order is highest score first;
equal scores rank the faster run higher.  Only the best
:data:`~bounce_ball.config.LEADERBOARD_SIZE` runs are written back, so the
file never grows beyond what the rankings screen shows.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Iterable, List

from bounce_ball.config import DEFAULT_PLAYER, LEADERBOARD_FILE, LEADERBOARD_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    """One finished run: player name, points scored and seconds survived."""

    name: str
    score: int
    time: int

    @classmethod
    def from_json(cls, raw: Any) -> "Record | None":
        """Build a record from a decoded JSON entry, or ``None`` if it is malformed."""

        if not isinstance(raw, dict):
            return None
        try:
            return cls(
                name=str(raw.get("name") or DEFAULT_PLAYER),
                score=int(raw.get("score", 0)),
                time=int(raw.get("time", 0)),
            )
        except (TypeError, ValueError, OverflowError):
            return None


def normalise_name(raw: str | None) -> str:
    """Strip ``raw`` and fall back to :data:`DEFAULT_PLAYER` when blank."""

    if raw is None or not raw.strip():
        return DEFAULT_PLAYER
    return raw.strip()


def rank(records: Iterable[Record]) -> List[Record]:
    """Highest score first; equal scores put the shorter time ahead."""

    return sorted(records, key=lambda record: (-record.score, record.time))


def format_rankings(records: Iterable[Record], limit: int = LEADERBOARD_SIZE) -> List[str]:
    """One line per entry: ``Rank i : name - (Score: s, Timer: ts)``."""

    return [
        f"Rank {index} : {record.name} - (Score: {record.score}, Timer: {record.time}s)"
        for index, record in enumerate(list(records)[:limit], start=1)
    ]


class LeaderboardStore:
    """JSON file backed leaderboard.

    Reads never raise: a missing or corrupt file is an empty leaderboard.
    Write failures are logged and otherwise ignored so a full disk cannot end
    a game; the caller still receives the updated rankings.
    """

    def __init__(self, path: str = LEADERBOARD_FILE, size: int = LEADERBOARD_SIZE) -> None:
        self.path = path
        self.size = size

    def load(self) -> List[Record]:
        if not os.path.exists(self.path):
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError, OSError) as exc:
            logger.warning("Ignoring unreadable leaderboard %s: %s", self.path, exc)
            return []

        if not isinstance(data, list):
            logger.warning("Ignoring leaderboard %s: expected a list, got %s", self.path, type(data).__name__)
            return []

        records = []
        for entry in data:
            record = Record.from_json(entry)
            if record is None:
                logger.warning("Skipping malformed leaderboard entry: %r", entry)
                continue
            records.append(record)

        # The stored data might not be sorted if it was edited by hand.
        return rank(records)

    def save(self, records: Iterable[Record]) -> bool:
        """Persist ``records``; return ``False`` if the write failed."""

        payload = [asdict(record) for record in records]
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as file:
                json.dump(payload, file, indent=2)
        except OSError as exc:
            logger.warning("Could not save leaderboard to %s: %s", self.path, exc)
            return False
        return True

    def record(self, name: str | None, score: int, time: int) -> List[Record]:
        """Add a finished run and return the updated top entries."""

        entry = Record(name=normalise_name(name), score=score, time=time)
        records = rank([*self.load(), entry])[: self.size]
        self.save(records)
        logger.info("Recorded %s: score %d in %ds", entry.name, score, time)
        return records
