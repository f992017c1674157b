"""
Assessment Results
supplier_scoring/scoring/assessment_results.py

Reduces AI-assistant answers to the plain score map ScoreAggregator consumes,
and tracks per-question status and completion for an entity.

An AI score is stored exactly like a manual one; the only extra state kept
is the set of criteria flagged for manual review.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Collection, Dict, Iterable, Mapping, Optional, Set, Union

import structlog

from supplier_scoring.models.assessment import AIAssessmentResult
from supplier_scoring.models.criterion import CriterionDefinition
from supplier_scoring.models.enumerations import QuestionStatus
from supplier_scoring.scoring.utils import mean

logger = structlog.get_logger(__name__)

ResultInput = Union[
    Mapping[str, Union[AIAssessmentResult, Mapping[str, Any]]],
    Iterable[AIAssessmentResult],
]


@dataclass
class AssessmentOutcome:
    """Output of reduce_results()."""
    scores: Dict[str, Optional[int]]
    review_flags: Set[str] = field(default_factory=set)
    scored_count: int = 0
    average_score: Optional[float] = None   # None when the assistant scored nothing


def _as_results(results: ResultInput) -> Iterable[AIAssessmentResult]:
    if isinstance(results, Mapping):
        for criterion_id, item in results.items():
            if isinstance(item, AIAssessmentResult):
                yield item
            else:
                yield AIAssessmentResult.model_validate({"criterionId": criterion_id, **item})
    else:
        yield from results


def reduce_results(results: ResultInput) -> AssessmentOutcome:
    """
    Reduce AI-assistant answers to a score map plus review flags.

    Args:
        results: Either criterion id → result (model or raw dict in the
                 assistant's {score, confidence, reasoning, sources,
                 needsReview} shape) or an iterable of AIAssessmentResult.

    Returns:
        AssessmentOutcome; unscored criteria map to None.
    """
    scores: Dict[str, Optional[int]] = {}
    flags: Set[str] = set()

    for result in _as_results(results):
        scores[result.criterion_id] = result.score
        if result.needs_review:
            flags.add(result.criterion_id)

    scored = [score for score in scores.values() if score is not None]
    outcome = AssessmentOutcome(
        scores=scores,
        review_flags=flags,
        scored_count=len(scored),
        average_score=mean(scored) if scored else None,
    )

    logger.info(
        "assessment_reduced",
        results=len(scores),
        scored=outcome.scored_count,
        needs_review=len(flags),
    )
    return outcome


def question_status(
    criterion_id: str,
    scores: Mapping[str, Optional[float]],
    review_flags: Collection[str] = (),
) -> QuestionStatus:
    """Review flag wins over an existing score."""
    if criterion_id in review_flags:
        return QuestionStatus.NEEDS_REVIEW
    if scores.get(criterion_id) is not None:
        return QuestionStatus.COMPLETED
    return QuestionStatus.NO_SCORE


def completion_percentage(
    scores: Mapping[str, Optional[float]],
    criteria: Mapping[str, CriterionDefinition],
    review_flags: Collection[str] = (),
) -> int:
    """
    Share of defined criteria that are answered and not awaiting review.

    Returns:
        Whole percentage 0-100, rounded half-up. 0 when no criteria exist.
    """
    if not criteria:
        return 0
    completed = sum(
        1 for criterion_id in criteria
        if question_status(criterion_id, scores, review_flags) is QuestionStatus.COMPLETED
    )
    ratio = Decimal(completed * 100) / Decimal(len(criteria))
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
