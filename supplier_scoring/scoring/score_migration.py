"""
Legacy Score Migration
supplier_scoring/scoring/score_migration.py

Moves stored scores that were entered against 3- or 5-point guides onto the
canonical 1-4 scale, using the same interpolation as ScaleNormalizer.

Scale detection per score:
    criterion known    → its max_score
    criterion unknown  → 5 if score > 4 else 4
"""

import logging
from typing import Dict, Mapping, Optional

from supplier_scoring.models.criterion import CANONICAL_MAX_SCORE, CriterionDefinition
from supplier_scoring.scoring.scale_normalizer import ScaleNormalizer
from supplier_scoring.scoring.utils import is_number

logger = logging.getLogger(__name__)

_normalizer = ScaleNormalizer()


def migrate_score(value: Optional[float], old_max: float) -> Optional[int]:
    """Normalize one stored score; None stays None."""
    if value is None:
        return None
    return _normalizer.normalize_value(value, old_max)


def migrate_scores(
    scores: Mapping[str, Optional[float]],
    criteria: Optional[Mapping[str, CriterionDefinition]] = None,
) -> Dict[str, Optional[int]]:
    """
    Normalize every score in a stored score map.

    Args:
        scores: criterion id → stored score (None = unanswered).
        criteria: Optional definitions; their max_score names the old scale.

    Returns:
        New score map on the canonical scale.
    """
    criteria = criteria or {}
    migrated: Dict[str, Optional[int]] = {}
    changed = 0

    for criterion_id, score in scores.items():
        if score is None:
            migrated[criterion_id] = None
            continue

        criterion = criteria.get(criterion_id)
        if criterion is not None and criterion.max_score:
            old_max = criterion.max_score
        else:
            old_max = 5 if is_number(score) and score > CANONICAL_MAX_SCORE else CANONICAL_MAX_SCORE

        migrated[criterion_id] = migrate_score(score, old_max)
        if migrated[criterion_id] != score:
            changed += 1

    logger.info(
        "scores_migrated",
        extra={"entries": len(migrated), "changed": changed},
    )
    return migrated
