from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class RoundRecord:
    """Outcome of one completed round; immutable once appended."""
    round_index: int
    matches_in_round: int
    score_at_round_end: int


@dataclass(slots=True)
class RoundHistory:
    """Append-only log of completed rounds for the current player."""
    records: List[RoundRecord] = field(default_factory=list)

    def append(self, matches_in_round: int, score_at_round_end: int) -> RoundRecord:
        record = RoundRecord(
            round_index=self.next_index(),
            matches_in_round=matches_in_round,
            score_at_round_end=score_at_round_end,
        )
        self.records.append(record)
        return record

    def next_index(self) -> int:
        if not self.records:
            return 1
        return self.records[-1].round_index + 1

    def replace(self, records: List[RoundRecord]) -> None:
        self.records = list(records)
