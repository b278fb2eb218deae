"""
Per-character erosion thresholds.

Each non-space character gets a random, permanent threshold. Once the
running chaos maximum reaches it the character is gone for good. Spaces
get a sentinel above the chaos ceiling so word spacing never collapses.
"""

import numpy as np

from palimpsest.config import ErosionConfig
from palimpsest.paragraph import Paragraph


class ErosionThresholdTable:
    """
    Immutable table of erosion thresholds, shaped exactly like the paragraph.

    Because thresholds never change after generation, whether a character
    is eroded depends only on the highest chaos ever reached, not on the
    path taken to get there.
    """

    def __init__(self, rows: list[tuple[float, ...]]):
        self._rows = tuple(tuple(float(t) for t in row) for row in rows)

    @classmethod
    def generate(
        cls,
        paragraph: Paragraph,
        rng: np.random.Generator,
        config: ErosionConfig | None = None,
    ) -> "ErosionThresholdTable":
        """
        Draw one threshold per character position.

        Args:
            paragraph: Lines to cover.
            rng: Random source.
            config: Erosion configuration. Uses defaults if None.
        """
        cfg = config or ErosionConfig()
        rows = []
        for line in paragraph:
            row = []
            for ch in line:
                if ch == " ":
                    row.append(cfg.space_threshold)
                else:
                    row.append(rng.uniform(0.0, cfg.threshold_cap))
            rows.append(tuple(row))
        return cls(rows)

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._rows

    @property
    def shape(self) -> tuple[int, ...]:
        """Per-line character counts."""
        return tuple(len(row) for row in self._rows)

    def matches(self, paragraph: Paragraph) -> bool:
        """True if the table mirrors the paragraph's shape."""
        return self.shape == tuple(len(line) for line in paragraph)

    def threshold(self, line: int, pos: int) -> float:
        return self._rows[line][pos]

    def is_eroded(self, line: int, pos: int, max_chaos: float) -> bool:
        return max_chaos >= self._rows[line][pos]

    def eroded_fraction(self, max_chaos: float) -> float:
        """Share of erodible (non-space) characters eroded at this chaos level."""
        flat = np.fromiter(
            (t for row in self._rows for t in row), dtype=np.float64
        )
        erodible = flat[flat <= 1.0]
        if erodible.size == 0:
            return 0.0
        return float(np.mean(max_chaos >= erodible))
