"""Population tracking.

Tracks per-kind counts over time and the conversions between kinds.
There is no scoring: a single remaining kind is reported as a
monoculture, nothing more.
"""

from __future__ import annotations

import logging
from collections import Counter, deque
from typing import TYPE_CHECKING, Any, Deque, Dict, Iterable, Optional, Tuple

from rps.config.simulation import POPULATION_HISTORY_LENGTH
from rps.kinds import Kind

if TYPE_CHECKING:
    from rps.systems.collision import Conversion

logger = logging.getLogger(__name__)


class PopulationTracker:
    """Tracks population dynamics: counts per kind and conversions.

    Attributes:
        total_conversions: Conversions recorded since start
        conversions_by_transition: Counter keyed by (from_kind, to_kind)
        history: Bounded (frame, counts) samples
    """

    def __init__(self, history_length: int = POPULATION_HISTORY_LENGTH) -> None:
        self.total_conversions: int = 0
        self.conversions_by_transition: Counter = Counter()
        self.history: Deque[Tuple[int, Dict[Kind, int]]] = deque(maxlen=history_length)
        self.current_counts: Dict[Kind, int] = {kind: 0 for kind in Kind}
        self.last_frame_conversions: int = 0
        self._frame_conversions: int = 0
        self._monoculture_logged = False

    def record_conversions(self, conversions: Iterable["Conversion"]) -> None:
        for conversion in conversions:
            self.conversions_by_transition[(conversion.from_kind, conversion.to_kind)] += 1
            self.total_conversions += 1
            self._frame_conversions += 1

    def sample(self, frame: int, counts: Dict[Kind, int]) -> None:
        """Record the counts at the end of a frame."""
        self.current_counts = dict(counts)
        self.history.append((frame, dict(counts)))
        self.last_frame_conversions = self._frame_conversions
        self._frame_conversions = 0

        remaining = self.surviving_kinds()
        if len(remaining) == 1 and not self._monoculture_logged:
            logger.info("Only %s remains at frame %d", remaining[0].name, frame)
            self._monoculture_logged = True
        elif len(remaining) > 1:
            self._monoculture_logged = False

    @property
    def total(self) -> int:
        return sum(self.current_counts.values())

    def surviving_kinds(self) -> list:
        return [kind for kind, n in self.current_counts.items() if n > 0]

    def is_monoculture(self) -> bool:
        """True when exactly one kind is left."""
        return len(self.surviving_kinds()) == 1

    def dominant_kind(self) -> Optional[Kind]:
        """Most numerous kind, or None on an empty arena or a tie for first."""
        if not self.total:
            return None
        ranked = sorted(self.current_counts.items(), key=lambda item: item[1], reverse=True)
        if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
            return None
        return ranked[0][0]

    def reset(self) -> None:
        self.total_conversions = 0
        self.conversions_by_transition.clear()
        self.history.clear()
        self.current_counts = {kind: 0 for kind in Kind}
        self.last_frame_conversions = 0
        self._frame_conversions = 0
        self._monoculture_logged = False

    def get_stats(self) -> Dict[str, Any]:
        return {
            "counts": {kind.value: n for kind, n in self.current_counts.items()},
            "total_population": self.total,
            "total_conversions": self.total_conversions,
            "last_frame_conversions": self.last_frame_conversions,
            "conversions": {
                f"{src.value}->{dst.value}": n
                for (src, dst), n in sorted(
                    self.conversions_by_transition.items(),
                    key=lambda item: (item[0][0].value, item[0][1].value),
                )
            },
            "monoculture": self.is_monoculture(),
        }
