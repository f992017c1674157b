"""
Tabular Definition Loader
supplier_scoring/scoring/definition_loader.py

Builds the question catalogue from decoded rows.

Pipeline per row:
  1.  Skip if CATEGORY or KEY EVALUATION QUESTIONS is blank
  2.  Skip if CATEGORY has no "N." prefix
  3.  ScoringGuideParser → raw options (default 4-point scale if nothing parses)
  4.  ScaleNormalizer → canonical options; skip if none lie in [1, 4]
  5.  IdentifierGenerator → criterion id
  6.  CriterionDefinition

Skipped rows are counted per SkipReason. A pass that yields no rows, or no
loadable question, raises CatalogueLoadError.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import structlog

from supplier_scoring.config import Settings, get_settings
from supplier_scoring.core.exceptions import CatalogueLoadError
from supplier_scoring.models.criterion import (
    CANONICAL_MAX_SCORE,
    CANONICAL_MIN_SCORE,
    CriterionDefinition,
    ScaleOption,
)
from supplier_scoring.models.enumerations import SkipReason
from supplier_scoring.models.rows import QuestionRow
from supplier_scoring.scoring.guide_parser import ScoringGuideParser
from supplier_scoring.scoring.identifier import IdentifierGenerator
from supplier_scoring.scoring.scale_normalizer import ScaleNormalizer
from supplier_scoring.scoring.utils import extract_category_id, extract_category_name

logger = structlog.get_logger(__name__)

DEFAULT_SCALE = (
    ScaleOption(value=4, label="Excellent"),
    ScaleOption(value=3, label="Good"),
    ScaleOption(value=2, label="Fair"),
    ScaleOption(value=1, label="Poor"),
)

Row = Union[QuestionRow, Mapping[str, Any]]


@dataclass
class CatalogueLoadResult:
    """Output of TabularDefinitionLoader.load()."""
    criteria: Dict[str, CriterionDefinition]
    total_rows: int
    skipped: Dict[SkipReason, int] = field(default_factory=dict)
    defaulted_guides: int = 0   # rows that fell back to DEFAULT_SCALE
    floored_values: int = 0     # raw option values clamped to 1

    @property
    def loaded(self) -> int:
        return len(self.criteria)

    @property
    def skipped_count(self) -> int:
        return sum(self.skipped.values())


class TabularDefinitionLoader:
    """Turn catalogue rows into criterion definitions keyed by identifier."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.parser = ScoringGuideParser()
        self.normalizer = ScaleNormalizer()

    def load(self, rows: Optional[Iterable[Row]]) -> CatalogueLoadResult:
        """
        Run one load pass.

        Args:
            rows: Decoded catalogue rows (mappings keyed by header, or QuestionRow).

        Returns:
            CatalogueLoadResult with criteria and skip diagnostics.

        Raises:
            CatalogueLoadError: no rows were supplied, or none could be loaded.
        """
        if rows is None:
            raise CatalogueLoadError("Question source produced no rows")

        ids = IdentifierGenerator(slug_length=self.settings.SUBCATEGORY_SLUG_LENGTH)
        result = CatalogueLoadResult(criteria={}, total_rows=0)

        for idx, raw_row in enumerate(rows):
            result.total_rows += 1
            row = raw_row if isinstance(raw_row, QuestionRow) else QuestionRow.from_mapping(raw_row)

            reason = self._load_row(row, ids, result)
            if reason is not None:
                result.skipped[reason] = result.skipped.get(reason, 0) + 1
                logger.debug(
                    "catalogue_row_skipped",
                    row=idx + 1,
                    reason=reason.value,
                    category=row.category[:50],
                    question=row.question[:50],
                )

        if result.total_rows == 0:
            raise CatalogueLoadError("Question source produced no rows", report=result)

        self._log_summary(result)

        if result.loaded == 0:
            raise CatalogueLoadError(
                f"No questions loaded from {result.total_rows} rows", report=result
            )
        return result

    def _load_row(
        self,
        row: QuestionRow,
        ids: IdentifierGenerator,
        result: CatalogueLoadResult,
    ) -> Optional[SkipReason]:
        """Add one row to result.criteria, or return why it was skipped."""
        if not row.category.strip():
            return SkipReason.NO_CATEGORY
        if not row.question.strip():
            return SkipReason.NO_QUESTION

        category_id = extract_category_id(row.category)
        if not category_id:
            return SkipReason.NO_CATEGORY_ID

        question = row.question.strip()
        raw_options = self.parser.parse(row.scoring_guide)
        if raw_options:
            scale = self.normalizer.normalize(raw_options)
            options = scale.options
            result.floored_values += len(scale.floored_values)
        else:
            logger.warning("scoring_guide_defaulted", question=question[:50])
            options = list(DEFAULT_SCALE)
            result.defaulted_guides += 1

        valid = [
            opt for opt in options
            if CANONICAL_MIN_SCORE <= opt.value <= CANONICAL_MAX_SCORE
        ]
        if not valid:
            logger.error("no_valid_options", question=question[:50])
            return SkipReason.NO_VALID_OPTIONS

        criterion_id = ids.next_id(category_id, row.sub_category)
        result.criteria[criterion_id] = CriterionDefinition(
            category=extract_category_name(row.category),
            category_id=category_id,
            sub_category=row.sub_category,
            priority=row.priority.strip() or self.settings.DEFAULT_PRIORITY,
            question=question,
            options=tuple(valid),
            max_score=CANONICAL_MAX_SCORE,
        )
        return None

    def _log_summary(self, result: CatalogueLoadResult) -> None:
        if result.skipped_count:
            logger.warning(
                "catalogue_rows_skipped",
                skipped=result.skipped_count,
                reasons={reason.value: count for reason, count in result.skipped.items()},
            )

        logger.info(
            "catalogue_loaded",
            loaded=result.loaded,
            total_rows=result.total_rows,
            defaulted_guides=result.defaulted_guides,
            floored_values=result.floored_values,
        )

        if result.loaded < self.settings.EXPECTED_MIN_QUESTIONS:
            logger.warning(
                "catalogue_smaller_than_expected",
                loaded=result.loaded,
                expected_min=self.settings.EXPECTED_MIN_QUESTIONS,
            )
