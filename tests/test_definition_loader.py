# tests/test_definition_loader.py
"""
Tabular Definition Loader Tests - row policy, diagnostics and load failures
"""

import pytest

from supplier_scoring.core.exceptions import CatalogueLoadError
from supplier_scoring.models.enumerations import SkipReason
from supplier_scoring.models.rows import QuestionRow
from supplier_scoring.scoring.definition_loader import DEFAULT_SCALE, TabularDefinitionLoader


def _pairs(criterion):
    return [(opt.value, opt.label) for opt in criterion.options]


class TestLoadedCriteria:
    """Rows that pass the skip policy."""

    def test_identifiers_in_row_order(self, criteria):
        assert list(criteria) == ["1a.1", "1a.2", "2b.1", "2.Energyuse.1"]

    def test_four_point_guide(self, criteria):
        criterion = criteria["1a.1"]
        assert criterion.category == "Material Sourcing"
        assert criterion.category_id == "1"
        assert criterion.sub_category == "1a"
        assert criterion.priority == "HIGH"
        assert criterion.question == "Can the supplier repair returned components?"
        assert criterion.max_score == 4
        assert _pairs(criterion) == [
            (4, "Fully repairable"),
            (3, "Partial"),
            (2, "Limited"),
            (1, "No"),
        ]

    def test_three_point_guide_normalized(self, criteria):
        assert _pairs(criteria["1a.2"]) == [(4, "Always"), (3, "Sometimes"), (1, "Never")]

    def test_five_point_guide_deduplicated(self, criteria):
        assert _pairs(criteria["2b.1"]) == [(4, "Excellent"), (3, "Good"), (2, "Weak"), (1, "Poor")]

    def test_missing_guide_uses_default_scale(self, criteria, catalogue):
        assert criteria["2.Energyuse.1"].options == DEFAULT_SCALE
        assert catalogue.defaulted_guides == 1

    def test_priority_defaults_to_medium(self, criteria):
        assert criteria["1a.2"].priority == "MEDIUM"

    def test_priority_uppercased(self, criteria):
        assert criteria["2b.1"].priority == "LOW"

    def test_unknown_priority_passes_through(self, criteria):
        criterion = criteria["2.Energyuse.1"]
        assert criterion.priority == "CRITICAL"
        assert not criterion.is_known_priority


class TestSkipDiagnostics:
    """Skipped rows are counted by reason, not raised."""

    def test_counts(self, catalogue):
        assert catalogue.total_rows == 7
        assert catalogue.loaded == 4
        assert catalogue.skipped_count == 3

    def test_reasons(self, catalogue):
        assert catalogue.skipped == {
            SkipReason.NO_CATEGORY: 1,
            SkipReason.NO_QUESTION: 1,
            SkipReason.NO_CATEGORY_ID: 1,
        }

    def test_skipped_rows_do_not_advance_counters(self, test_settings):
        rows = [
            {"CATEGORY": "2. Operations", "SUB-CATEGORY": "2b", "KEY EVALUATION QUESTIONS": "", "SCORING GUIDE": ""},
            {"CATEGORY": "2. Operations", "SUB-CATEGORY": "2b", "KEY EVALUATION QUESTIONS": "Q", "SCORING GUIDE": ""},
        ]
        result = TabularDefinitionLoader(test_settings).load(rows)
        assert list(result.criteria) == ["2b.1"]

    def test_floored_values_counted(self, test_settings):
        rows = [
            {
                "CATEGORY": "4. Commitment & Collaboration",
                "SUB-CATEGORY": "4a",
                "KEY EVALUATION QUESTIONS": "Is there a public commitment?",
                "SCORING GUIDE": "0 = Unknown\n1 = No\n2 = Yes",
            }
        ]
        result = TabularDefinitionLoader(test_settings).load(rows)
        assert result.floored_values == 1
        assert [(o.value, o.label) for o in result.criteria["4a.1"].options] == [(4, "Yes"), (1, "No")]


class TestRowInputs:
    """Header whitespace, None cells and QuestionRow models."""

    def test_header_whitespace_trimmed(self, test_settings):
        rows = [
            {
                " CATEGORY ": "5. Compliance & Governance",
                "SUB-CATEGORY ": "5a",
                " PRIORITY": "high",
                "KEY EVALUATION QUESTIONS ": "Are audits published?",
                " SCORING GUIDE": "1=No, 2=Yes",
            }
        ]
        criteria = TabularDefinitionLoader(test_settings).load(rows).criteria
        assert list(criteria) == ["5a.1"]
        assert criteria["5a.1"].priority == "HIGH"

    def test_none_cells(self, test_settings):
        rows = [
            {
                "CATEGORY": "6. Overall Performance & References",
                "SUB-CATEGORY": None,
                "PRIORITY": None,
                "KEY EVALUATION QUESTIONS": "Can references be provided?",
                "SCORING GUIDE": None,
            }
        ]
        criteria = TabularDefinitionLoader(test_settings).load(rows).criteria
        assert list(criteria) == ["6.q.1"]
        assert criteria["6.q.1"].priority == "MEDIUM"

    def test_question_row_models(self, test_settings):
        row = QuestionRow(
            category="3. Product Design & Lifecycle",
            sub_category="3c",
            priority="Medium",
            question="Is packaging recyclable?",
            scoring_guide="1=No, 2=Partly, 3=Yes",
        )
        criteria = TabularDefinitionLoader(test_settings).load([row]).criteria
        assert [(o.value, o.label) for o in criteria["3c.1"].options] == [(4, "Yes"), (3, "Partly"), (1, "No")]

    def test_oversized_guide_value(self, test_settings):
        rows = [
            {
                "CATEGORY": "1. Material Sourcing",
                "SUB-CATEGORY": "1a",
                "KEY EVALUATION QUESTIONS": "Is the supplier certified?",
                "SCORING GUIDE": "1=No, " + "9" * 400 + "=Yes",
            }
        ]
        result = TabularDefinitionLoader(test_settings).load(rows)
        assert [(o.value, o.label) for o in result.criteria["1a.1"].options] == [(4, "Yes"), (1, "No")]

    def test_blank_priority_uses_configured_default(self):
        from supplier_scoring.config import Settings

        rows = [
            {
                "CATEGORY": "1. Material Sourcing",
                "SUB-CATEGORY": "1a",
                "PRIORITY": "   ",
                "KEY EVALUATION QUESTIONS": "Q",
            }
        ]
        settings = Settings(EXPECTED_MIN_QUESTIONS=0, DEFAULT_PRIORITY="LOW")
        assert TabularDefinitionLoader(settings).load(rows).criteria["1a.1"].priority == "LOW"

    def test_reload_is_stable(self, sample_question_rows, test_settings):
        loader = TabularDefinitionLoader(test_settings)
        assert list(loader.load(sample_question_rows).criteria) == list(loader.load(sample_question_rows).criteria)


class TestLoadFailures:
    """A catalogue of zero questions is a load failure."""

    def test_none_source(self, test_settings):
        with pytest.raises(CatalogueLoadError):
            TabularDefinitionLoader(test_settings).load(None)

    def test_no_rows(self, test_settings):
        with pytest.raises(CatalogueLoadError):
            TabularDefinitionLoader(test_settings).load([])

    def test_no_loadable_rows(self, test_settings):
        rows = [{"CATEGORY": "", "KEY EVALUATION QUESTIONS": "Q"}, {"CATEGORY": "No id", "KEY EVALUATION QUESTIONS": "Q"}]
        with pytest.raises(CatalogueLoadError) as exc_info:
            TabularDefinitionLoader(test_settings).load(rows)
        report = exc_info.value.report
        assert report.total_rows == 2
        assert report.skipped == {SkipReason.NO_CATEGORY: 1, SkipReason.NO_CATEGORY_ID: 1}

    def test_expected_minimum_only_warns(self):
        from supplier_scoring.config import Settings

        rows = [{"CATEGORY": "1. Material Sourcing", "SUB-CATEGORY": "1a", "KEY EVALUATION QUESTIONS": "Q"}]
        result = TabularDefinitionLoader(Settings(EXPECTED_MIN_QUESTIONS=60)).load(rows)
        assert result.loaded == 1
