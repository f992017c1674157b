"""
Scoring Guide Parser
supplier_scoring/scoring/guide_parser.py

Turns the free-text SCORING GUIDE cell of a catalogue row into raw
(value, label) pairs. Values are left on the scale the guide was authored in;
see scale_normalizer.py for the mapping onto 1-4.

Accepted shapes:
  Multi-line, one option per line:
      4 = Fully documented
      3 = Partially documented
      ...
  Single line, comma-joined, labels may contain commas or parentheses:
      1=No, 2=ISO 9001 (Quality Management Systems), or others, 3=Both

Usage:
    parser = ScoringGuideParser()
    parser.parse("1=No, 2=Limited, 3=Partial, 4=Fully repairable")
    # [RawOption(1, 'No'), RawOption(2, 'Limited'), RawOption(3, 'Partial'),
    #  RawOption(4, 'Fully repairable')]
"""

import re
from typing import List, NamedTuple, Optional

import structlog

logger = structlog.get_logger(__name__)

# "4=Label" or "4 = Label" on its own line
_LINE_RE = re.compile(r"^(\d+)\s*=\s*(.+)$")

# "<int>=<text>" where text runs until the next "<int>=" or end of string
_INLINE_RE = re.compile(r"(\d+)\s*=\s*([^=]+?)(?=\s*\d+\s*=|$)")

# Separator comma: only a comma directly followed by "<int>="
_SEPARATOR_RE = re.compile(r",\s*(?=\d+\s*=)")

_TRAILING_COMMA_RE = re.compile(r",\s*$")


def _to_int(digits: str) -> Optional[int]:
    try:
        return int(digits)
    except ValueError:
        # beyond the interpreter's int-from-string digit limit
        logger.warning("scoring_guide_value_too_long", digits=len(digits))
        return None


class RawOption(NamedTuple):
    """An answer option on its authored scale."""
    value: int
    label: str


class ScoringGuideParser:
    """Parse scoring-guide text into raw (value, label) pairs."""

    def parse(self, guide: Optional[str]) -> List[RawOption]:
        """
        Parse one scoring guide.

        Args:
            guide: Free text from the SCORING GUIDE column. None or blank
                   yields an empty list.

        Returns:
            Unordered list of RawOption. Empty when nothing parses; the caller
            decides on a fallback scale.
        """
        lines = [line.strip() for line in (guide or "").splitlines()]
        lines = [line for line in lines if line]

        if len(lines) > 1:
            return self._parse_lines(lines)
        if len(lines) == 1:
            return self._parse_single_line(lines[0])
        return []

    def _parse_lines(self, lines: List[str]) -> List[RawOption]:
        options = []
        for line in lines:
            match = _LINE_RE.match(line)
            value = _to_int(match.group(1)) if match else None
            if value is not None:
                options.append(RawOption(value, match.group(2).strip()))
        return options

    def _parse_single_line(self, line: str) -> List[RawOption]:
        options = []
        for match in _INLINE_RE.finditer(line):
            value = _to_int(match.group(1))
            label = _TRAILING_COMMA_RE.sub("", match.group(2).strip()).strip()
            if label and value is not None and value > 0:
                options.append(RawOption(value, label))

        if options:
            return options

        # Fallback: split on separator commas and match each part
        for part in _SEPARATOR_RE.split(line):
            match = _LINE_RE.match(part.strip())
            if not match:
                continue
            value = _to_int(match.group(1))
            label = match.group(2).strip()
            if value is not None and value > 0 and label:
                options.append(RawOption(value, label))

        if not options:
            logger.debug("scoring_guide_unparsed", guide=line[:80])
        return options
