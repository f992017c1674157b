"""
Criterion Identifier Generator
supplier_scoring/scoring/identifier.py

Derives the key a criterion is stored and scored under.

    sub-category contains "<digits><letter>"  ->  "<category_id><letter>.<n>"   e.g. "1d.2"
    otherwise                                 ->  "<category_id>.<slug>.<n>"    e.g. "3.Packaging.1"

n counts rows seen for the exact (category_id, sub_category) pair, from 1.
The leading digit run of every identifier is the category id, which is what
ScoreAggregator groups categories by.

One generator covers one load pass; create a new one per pass.
"""

import re
from typing import Dict, Set, Tuple

import structlog

logger = structlog.get_logger(__name__)

_SUBCATEGORY_CODE_RE = re.compile(r"(\d+)([a-z])", re.IGNORECASE)
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


class IdentifierGenerator:
    """Issue unique, order-stable criterion identifiers for one load pass."""

    def __init__(self, slug_length: int = 10):
        self.slug_length = slug_length
        self._counts: Dict[Tuple[str, str], int] = {}
        self._issued: Set[str] = set()

    def next_id(self, category_id: str, sub_category: str) -> str:
        """
        Issue the identifier for the next row of (category_id, sub_category).

        Args:
            category_id: Digits extracted from the category text ("2").
            sub_category: Sub-category text exactly as in the row ("2b").

        Returns:
            Identifier unique within this generator, e.g. "2b.3" for the third
            row of sub-category "2b".
        """
        key = (category_id, sub_category)
        n = self._counts.get(key, 0) + 1
        self._counts[key] = n

        prefix = self._prefix(category_id, sub_category)
        identifier = f"{prefix}.{n}"

        # Different sub-category strings can reduce to the same prefix
        # ("1d" / "1d Energy", "A-B" / "AB"); skip numbers already taken.
        while identifier in self._issued:
            logger.warning(
                "identifier_collision",
                identifier=identifier,
                category_id=category_id,
                sub_category=sub_category,
            )
            n += 1
            identifier = f"{prefix}.{n}"

        self._issued.add(identifier)
        return identifier

    def _prefix(self, category_id: str, sub_category: str) -> str:
        match = _SUBCATEGORY_CODE_RE.search(sub_category or "")
        if match:
            return f"{category_id or match.group(1)}{match.group(2).lower()}"

        slug = _NON_ALNUM_RE.sub("", sub_category or "")[: self.slug_length] or "q"
        return f"{category_id}.{slug}" if category_id else slug
