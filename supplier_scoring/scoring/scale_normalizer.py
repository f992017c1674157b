"""
Scale Normalizer
supplier_scoring/scoring/scale_normalizer.py

Maps answer options from their authored scale onto the canonical 1-4 scale.

Formula (linear interpolation, half-up rounding, clamped to [1, 4]):
    normalized = round(1 + (raw - 1) × 3 / (old_max - 1))

    old_max = 3:  1→1  2→3  3→4
    old_max = 4:  identity
    old_max = 5:  1→1  2→2  3→3  4→3  5→4

Defensive floor: old_max < 1, raw < 1, old_max == 1 or a non-numeric input
returns 1 and is logged, never raised.

Collisions: when several raw values land on the same canonical value, the
option with the higher raw value keeps its label.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import structlog

from supplier_scoring.models.criterion import (
    CANONICAL_MAX_SCORE,
    CANONICAL_MIN_SCORE,
    ScaleOption,
)
from supplier_scoring.scoring.guide_parser import RawOption
from supplier_scoring.scoring.utils import as_decimal, clamp, is_number, round_half_up

logger = structlog.get_logger(__name__)

_SPAN = CANONICAL_MAX_SCORE - CANONICAL_MIN_SCORE


def _describe(value: Any) -> str:
    try:
        return repr(value)[:40]
    except ValueError:
        # int too long to render as a string
        return f"<int of {value.bit_length()} bits>"


@dataclass
class NormalizedScale:
    """Output of ScaleNormalizer.normalize()."""
    options: List[ScaleOption]                        # descending by value, unique values
    old_max: Any = None                               # highest raw value observed
    floored_values: List[Any] = field(default_factory=list)  # raw values forced to 1


class ScaleNormalizer:
    """Normalize raw answer options onto the canonical 1-4 scale."""

    def normalize_value(self, raw: Any, old_max: Any) -> int:
        """
        Normalize one raw value.

        Args:
            raw: Value on the authored scale.
            old_max: Highest value of the authored scale.

        Returns:
            Integer in [1, 4].

        Examples:
            >>> ScaleNormalizer().normalize_value(2, 3)
            3
            >>> ScaleNormalizer().normalize_value(4, 5)
            3
        """
        value, _ = self._normalize(raw, old_max)
        return value

    def normalize(self, raw_options: Sequence[RawOption]) -> NormalizedScale:
        """
        Normalize a parsed scoring guide.

        Args:
            raw_options: (value, label) pairs from ScoringGuideParser.

        Returns:
            NormalizedScale with at most one option per canonical value.
        """
        if not raw_options:
            return NormalizedScale(options=[])

        numeric = [opt.value for opt in raw_options if is_number(opt.value)]
        old_max = max(numeric) if numeric else None

        # canonical value -> (raw value that won, label)
        chosen: Dict[int, Tuple[Any, str]] = {}
        floored: List[Any] = []

        for opt in raw_options:
            canonical, was_floored = self._normalize(opt.value, old_max)
            if was_floored:
                floored.append(opt.value)
            existing = chosen.get(canonical)
            if existing is None or self._outranks(opt.value, existing[0]):
                chosen[canonical] = (opt.value, opt.label)

        options = [
            ScaleOption(value=value, label=label)
            for value, (_, label) in sorted(chosen.items(), reverse=True)
        ]
        return NormalizedScale(options=options, old_max=old_max, floored_values=floored)

    def _normalize(self, raw: Any, old_max: Any) -> Tuple[int, bool]:
        """Return (canonical value, whether the defensive floor applied)."""
        if not is_number(raw) or not is_number(old_max) or old_max < 1 or raw < 1:
            logger.warning("scale_value_floored", raw_value=_describe(raw), old_max=_describe(old_max))
            return CANONICAL_MIN_SCORE, True

        if old_max == 1:
            # a one-point scale has nothing to interpolate
            return CANONICAL_MIN_SCORE, False
        if raw >= old_max:
            return CANONICAL_MAX_SCORE, False

        # Decimal keeps oversized ints and mixed int/float/Decimal inputs exact
        normalized = CANONICAL_MIN_SCORE + (as_decimal(raw) - 1) * _SPAN / (as_decimal(old_max) - 1)
        return clamp(round_half_up(normalized), CANONICAL_MIN_SCORE, CANONICAL_MAX_SCORE), False

    @staticmethod
    def _outranks(candidate: Any, incumbent: Any) -> bool:
        if not is_number(candidate):
            return False
        if not is_number(incumbent):
            return True
        return candidate > incumbent
