"""
Score Aggregator
supplier_scoring/scoring/aggregator.py

Combines per-question scores, criterion definitions and category weights.

Formulas:
    total_score     = mean(valid scores)
    category_score  = mean(valid scores in category)
    weighted_score  = Σ(category_score_i × w_i) / Σ(w_i)   over answered categories only

A score is valid when it is numeric (int, float or Decimal), not None and
within [1, max_score] of its criterion ([1, 4] when the criterion is
unknown). Categories without a valid answer are left out of the weighted
score entirely, they do not count as 0. Every function returns 0.0 when
there is nothing to average.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import structlog

from supplier_scoring.config import get_settings
from supplier_scoring.models.criterion import (
    CANONICAL_MAX_SCORE,
    CANONICAL_MIN_SCORE,
    CriterionDefinition,
)
from supplier_scoring.scoring.utils import is_number, leading_digits, mean

logger = structlog.get_logger(__name__)

Scores = Mapping[str, Optional[float]]
Weights = Mapping[str, float]
Criteria = Mapping[str, CriterionDefinition]


@dataclass
class ScoreCalculation:
    """Output of ScoreAggregator.calculate_all()."""
    total_score: float
    weighted_score: float
    category_scores: Dict[str, float] = field(default_factory=dict)           # 0 when unanswered
    weighted_category_scores: Dict[str, float] = field(default_factory=dict)  # score × weight


@dataclass
class CategoryBreakdown:
    """Per-category answer coverage, for reports."""
    category_id: str
    category_name: str
    answered: int
    total: int
    average_score: float
    weighted_score: float


class ScoreAggregator:
    """Stateless total / category / weighted score calculator."""

    def __init__(self, weight_tolerance: Optional[float] = None):
        if weight_tolerance is None:
            weight_tolerance = get_settings().WEIGHT_SUM_TOLERANCE
        self.weight_tolerance = weight_tolerance

    # ------------------------------------------------------------------
    # Validity and membership
    # ------------------------------------------------------------------

    @staticmethod
    def is_valid_score(score: Any, criterion: Optional[CriterionDefinition] = None) -> bool:
        if not is_number(score):
            return False
        max_score = criterion.max_score if criterion is not None else CANONICAL_MAX_SCORE
        return CANONICAL_MIN_SCORE <= score <= max_score

    @staticmethod
    def criterion_category(criterion_id: str, criteria: Optional[Criteria] = None) -> str:
        """Category id of a criterion, from its id prefix or else its definition."""
        category_id = leading_digits(criterion_id)
        if category_id:
            return category_id
        criterion = criteria.get(criterion_id) if criteria else None
        if criterion is None:
            return ""
        return criterion.category_id or leading_digits(criterion.category)

    def _valid_scores(self, scores: Scores, criteria: Optional[Criteria]) -> Dict[str, float]:
        criteria = criteria or {}
        return {
            criterion_id: float(score)
            for criterion_id, score in (scores or {}).items()
            if self.is_valid_score(score, criteria.get(criterion_id))
        }

    def _in_category(self, criterion_id: str, category_id: str, criteria: Optional[Criteria]) -> bool:
        if leading_digits(criterion_id) == category_id:
            return True
        criterion = criteria.get(criterion_id) if criteria else None
        if criterion is None:
            return False
        return (criterion.category_id or leading_digits(criterion.category)) == category_id

    # ------------------------------------------------------------------
    # Scores
    # ------------------------------------------------------------------

    def total_score(self, scores: Scores, criteria: Optional[Criteria] = None) -> float:
        """
        Simple average of every valid score.

        Examples:
            >>> ScoreAggregator().total_score({"1a.1": 4, "1a.2": 2, "2b.1": None})
            3.0
        """
        return mean(self._valid_scores(scores, criteria).values())

    def category_score(
        self,
        scores: Scores,
        category_id: str,
        criteria: Optional[Criteria] = None,
    ) -> float:
        """Average of the valid scores belonging to category_id."""
        valid = self._valid_scores(scores, criteria)
        return mean(
            score for criterion_id, score in valid.items()
            if self._in_category(criterion_id, category_id, criteria)
        )

    def weighted_score(
        self,
        scores: Scores,
        weights: Weights,
        criteria: Optional[Criteria] = None,
    ) -> float:
        """
        Weighted mean of category scores over answered categories.

        Returns:
            Σ(cs_i × w_i) / Σ(w_i) for categories with cs_i > 0. If those
            weights already sum to 1 the weighted sum is returned as is.
            0.0 when no category has an answer.
        """
        weighted_sum = 0.0
        total_weight = 0.0
        for category_id, weight in (weights or {}).items():
            category_score = self.category_score(scores, category_id, criteria)
            if category_score > 0:
                weighted_sum += category_score * weight
                total_weight += weight

        if total_weight <= 0:
            return 0.0
        if math.isclose(total_weight, 1.0, rel_tol=0.0, abs_tol=self.weight_tolerance):
            return weighted_sum
        return weighted_sum / total_weight

    def calculate_all(
        self,
        scores: Scores,
        weights: Weights,
        criteria: Optional[Criteria] = None,
    ) -> ScoreCalculation:
        """
        Total, weighted and per-category scores in one pass.

        Args:
            scores: criterion id → score (None = unanswered).
            weights: category id → weight; defines which categories are reported.
            criteria: Optional definitions for max-score checks and category lookup.

        Returns:
            ScoreCalculation.
        """
        weights = weights or {}
        category_scores: Dict[str, float] = {}
        weighted_category_scores: Dict[str, float] = {}

        for category_id, weight in weights.items():
            category_score = self.category_score(scores, category_id, criteria)
            category_scores[category_id] = category_score
            weighted_category_scores[category_id] = category_score * weight

        result = ScoreCalculation(
            total_score=self.total_score(scores, criteria),
            weighted_score=self.weighted_score(scores, weights, criteria),
            category_scores=category_scores,
            weighted_category_scores=weighted_category_scores,
        )

        logger.debug(
            "scores_calculated",
            answered=len(self._valid_scores(scores, criteria)),
            total_score=result.total_score,
            weighted_score=result.weighted_score,
            category_scores=category_scores,
        )
        return result

    def category_breakdown(
        self,
        scores: Scores,
        weights: Weights,
        criteria: Criteria,
    ) -> Dict[str, CategoryBreakdown]:
        """
        Answered / total counts and averages per category present in criteria.

        Only criteria defined in the catalogue are counted; scores for unknown
        ids are ignored here.
        """
        scores = scores or {}
        weights = weights or {}
        grouped: Dict[str, List[str]] = {}
        names: Dict[str, str] = {}
        for criterion_id, criterion in criteria.items():
            category_id = criterion.category_id or self.criterion_category(criterion_id, criteria)
            grouped.setdefault(category_id, []).append(criterion_id)
            names.setdefault(category_id, criterion.category)

        breakdown: Dict[str, CategoryBreakdown] = {}
        for category_id, criterion_ids in grouped.items():
            answered = [
                float(scores[cid]) for cid in criterion_ids
                if self.is_valid_score(scores.get(cid), criteria[cid])
            ]
            average = mean(answered)
            breakdown[category_id] = CategoryBreakdown(
                category_id=category_id,
                category_name=names[category_id],
                answered=len(answered),
                total=len(criterion_ids),
                average_score=average,
                weighted_score=average * weights.get(category_id, 0.0),
            )
        return breakdown
