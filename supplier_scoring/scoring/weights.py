"""
Category Weights
supplier_scoring/scoring/weights.py

Loads category weights from decoded weight rows and rescales them to sum 1.0.

Normalization:
    w_i' = w_i / Σ w_j
    Σ w_j == 0  →  weights returned unchanged
"""

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from supplier_scoring.config import Settings, get_settings
from supplier_scoring.core.exceptions import WeightSourceError
from supplier_scoring.models.assessment import CategoryWeight
from supplier_scoring.models.rows import WeightRow
from supplier_scoring.scoring.utils import extract_category_id, is_number

logger = logging.getLogger(__name__)

_LEADING_NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

DEFAULT_CATEGORY_NAMES: Dict[str, str] = {
    "1": "Material Sourcing",
    "2": "Operational Practices & Resource Efficiency",
    "3": "Product Design & Lifecycle",
    "4": "Commitment & Collaboration",
    "5": "Compliance & Governance",
    "6": "Overall Performance & References",
}


class WeightNormalizer:
    """Rescale a category weight map to sum to 1.0."""

    def normalize(self, weights: Mapping[str, float]) -> Dict[str, float]:
        """
        Divide every weight by the total.

        Args:
            weights: category id → non-negative weight.

        Returns:
            New dict. If the total is exactly 0 the weights are returned
            unchanged (as a copy).

        Examples:
            >>> WeightNormalizer().normalize({"1": 3.0, "2": 1.0})
            {'1': 0.75, '2': 0.25}
        """
        total = sum(weights.values())
        if total == 0:
            return dict(weights)

        normalized = {category_id: weight / total for category_id, weight in weights.items()}

        logger.info(
            "weights_normalized",
            extra={"categories": len(normalized), "original_total": float(total)},
        )
        return normalized


def _parse_weight(value: Any) -> float:
    """Leading-number parse ("0.25 (25%)" -> 0.25); anything else counts as 0."""
    if is_number(value):
        try:
            weight = float(value)
        except OverflowError:
            return 0.0
    else:
        match = _LEADING_NUMBER_RE.match(str(value or ""))
        weight = float(match.group(0)) if match else 0.0
    return weight if math.isfinite(weight) else 0.0


def load_weights(rows: Optional[Iterable[Union[WeightRow, Mapping[str, Any]]]]) -> Dict[str, float]:
    """
    Build a category weight map from decoded weight rows.

    Args:
        rows: Rows with a "category" ("N. Name") and a "weight" field.

    Returns:
        category id → weight. Rows without a category or without an
        extractable category id are ignored; unparseable weights are 0.

    Raises:
        WeightSourceError: the source produced no rows.
    """
    if rows is None:
        raise WeightSourceError("Weight source produced no rows")

    weights: Dict[str, float] = {}
    row_count = 0
    for raw_row in rows:
        row_count += 1
        row = raw_row if isinstance(raw_row, WeightRow) else WeightRow.from_mapping(raw_row)
        if not row.category:
            continue
        category_id = extract_category_id(row.category)
        if category_id:
            weights[category_id] = _parse_weight(row.weight)

    if row_count == 0:
        raise WeightSourceError("Weight source produced no rows")

    logger.info("weights_loaded", extra={"rows": row_count, "categories": len(weights)})
    return weights


def default_weights(settings: Optional[Settings] = None) -> Dict[str, float]:
    """Fallback weights from DEFAULT_CATEGORY_WEIGHTS (a copy)."""
    settings = settings or get_settings()
    return dict(settings.DEFAULT_CATEGORY_WEIGHTS)


def load_weights_or_default(
    rows: Optional[Iterable[Union[WeightRow, Mapping[str, Any]]]],
    settings: Optional[Settings] = None,
) -> Dict[str, float]:
    """
    load_weights(), falling back to default_weights() when the source has
    no rows or none of its rows names a category.
    """
    try:
        weights = load_weights(rows)
    except WeightSourceError as e:
        logger.warning("weights_defaulted", extra={"reason": e.message})
        return default_weights(settings)

    if not weights:
        logger.warning("weights_defaulted", extra={"reason": "no categorised weight rows"})
        return default_weights(settings)
    return weights

def category_weights(
    weights: Mapping[str, float],
    names: Optional[Mapping[str, str]] = None,
) -> List[CategoryWeight]:
    """Pair each weight with its category display name."""
    names = DEFAULT_CATEGORY_NAMES if names is None else names
    return [
        CategoryWeight(
            category_id=category_id,
            category_name=names.get(category_id, f"Category {category_id}"),
            weight=weight,
        )
        for category_id, weight in weights.items()
    ]
