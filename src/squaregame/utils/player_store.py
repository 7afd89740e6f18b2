"""JSON persistence for per-player round history."""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from squaregame.components.round_history import RoundRecord

logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"[^a-z0-9]+")


@dataclass(slots=True)
class PlayerData:
    name: str
    history: List[RoundRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "history": [
                {
                    "round_index": record.round_index,
                    "matches_in_round": record.matches_in_round,
                    "score_at_round_end": record.score_at_round_end,
                }
                for record in self.history
            ],
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "PlayerData":
        history = [
            RoundRecord(
                round_index=int(entry["round_index"]),
                matches_in_round=int(entry["matches_in_round"]),
                score_at_round_end=int(entry["score_at_round_end"]),
            )
            for entry in payload.get("history", [])
        ]
        return cls(name=str(payload["name"]), history=history)


def player_slug(name: str) -> str:
    slug = _SLUG_RE.sub("_", name.strip().lower()).strip("_")
    return slug or "player"


class PlayerStore:
    """Loads and saves PlayerData blobs keyed by player name, one file per player."""

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    @staticmethod
    def default_directory() -> Path:
        return Path.home() / ".squaregame" / "players"

    def path_for(self, name: str) -> Path:
        return self.directory / f"{player_slug(name)}.json"

    def save(self, data: PlayerData) -> Path:
        path = self.path_for(data.name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data.to_dict(), handle, indent=2)
        return path

    def load(self, name: str) -> PlayerData:
        """Return the stored data for ``name``; missing or unreadable files give an empty history."""
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return PlayerData(name=name)
        except OSError as exc:
            logger.warning("Cannot read history %s: %s", path, exc)
            return PlayerData(name=name)
        except ValueError as exc:
            logger.warning("Discarding unreadable history %s: %s", path, exc)
            return PlayerData(name=name)
        try:
            data = PlayerData.from_dict(payload)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Discarding malformed history %s: %s", path, exc)
            return PlayerData(name=name)
        data.name = name
        return data
