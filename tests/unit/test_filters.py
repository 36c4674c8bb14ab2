"""Tests for filter results and per-mode filter bookkeeping."""

import pytest
from pydantic import ValidationError

from varprio.models.filters import FilterResult, FilterResults, FilterStatus, FilterType, ModeOutcome
from varprio.models.inheritance import ModeOfInheritance

AD = ModeOfInheritance.AUTOSOMAL_DOMINANT
AR = ModeOfInheritance.AUTOSOMAL_RECESSIVE


class TestFilterResult:
    """Tests for FilterResult."""

    def test_pass(self):
        """Test a passing result."""
        result = FilterResult.pass_(FilterType.QUALITY_FILTER)
        assert result.passed()
        assert not result.failed()
        assert result.status == FilterStatus.PASSED

    def test_fail(self):
        """Test a failing result."""
        result = FilterResult.fail(FilterType.FREQUENCY_FILTER)
        assert result.failed()
        assert not result.passed()

    def test_unfiltered_status_rejected(self):
        """Test a result must be either a pass or a fail."""
        with pytest.raises(ValidationError, match="PASSED or FAILED"):
            FilterResult(filter_type=FilterType.QUALITY_FILTER, status=FilterStatus.UNFILTERED)


class TestModeOutcome:
    """Tests for ModeOutcome."""

    def test_last_write_wins(self):
        """Test a filter type is never both passed and failed."""
        outcome = ModeOutcome()
        outcome.record(FilterResult.fail(FilterType.QUALITY_FILTER))
        outcome.record(FilterResult.pass_(FilterType.QUALITY_FILTER))
        assert outcome.passed == {FilterType.QUALITY_FILTER}
        assert outcome.failed == set()
        assert outcome.status == FilterStatus.PASSED

    def test_empty_is_unfiltered(self):
        """Test an outcome with no results."""
        outcome = ModeOutcome()
        assert not outcome.has_results()
        assert outcome.status == FilterStatus.UNFILTERED


class TestFilterResults:
    """Tests for FilterResults."""

    def test_new_results_are_unfiltered(self):
        """Test nothing recorded means UNFILTERED and passed."""
        results = FilterResults()
        assert results.is_unfiltered()
        assert results.filter_status == FilterStatus.UNFILTERED
        assert results.passed()
        assert results.failed_filter_types == set()

    def test_of_records_under_any(self):
        """Test results given to of() are recorded under ANY."""
        results = FilterResults.of(
            FilterResult.pass_(FilterType.QUALITY_FILTER),
            FilterResult.fail(FilterType.FREQUENCY_FILTER),
        )
        assert results.passed_filter_types == {FilterType.QUALITY_FILTER}
        assert results.failed_filter_types == {FilterType.FREQUENCY_FILTER}
        assert results.filter_status == FilterStatus.FAILED
        assert not results.passed()

    def test_all_passed(self):
        """Test status is PASSED when only passes are recorded."""
        results = FilterResults.of(
            FilterResult.pass_(FilterType.QUALITY_FILTER),
            FilterResult.pass_(FilterType.PATHOGENICITY_FILTER),
        )
        assert results.filter_status == FilterStatus.PASSED
        assert results.passed()
        assert results.passed_filter(FilterType.PATHOGENICITY_FILTER)
        assert not results.passed_filter(FilterType.FREQUENCY_FILTER)

    def test_mode_falls_back_to_any(self):
        """Test a mode with no results of its own reports the ANY results."""
        results = FilterResults.of(FilterResult.fail(FilterType.QUALITY_FILTER))
        assert results.failed_filter_types_for_mode(AD) == {FilterType.QUALITY_FILTER}
        assert results.filter_status_for_mode(AD) == FilterStatus.FAILED

    def test_mode_result_overrides_any(self):
        """Test a mode's own outcome for a filter type overrides ANY."""
        results = FilterResults.of(FilterResult.fail(FilterType.FREQUENCY_FILTER))
        results.add(FilterResult.pass_(FilterType.FREQUENCY_FILTER), [AR])
        assert results.filter_status_for_mode(AR) == FilterStatus.PASSED
        assert results.filter_status_for_mode(AD) == FilterStatus.FAILED
        assert results.filter_status == FilterStatus.FAILED

    def test_mode_only_results_do_not_affect_any(self):
        """Test results recorded for a specific mode are not visible under ANY."""
        results = FilterResults()
        results.add(FilterResult.fail(FilterType.INHERITANCE_FILTER), [AD, AR])
        assert not results.is_unfiltered()
        assert results.failed_filter_types == set()
        assert results.failed_filter_types_for_mode(AD) == {FilterType.INHERITANCE_FILTER}
        assert results.failed_filter_types_for_mode(AR) == {FilterType.INHERITANCE_FILTER}

    def test_contributing_modes(self):
        """Test gene-score contribution is tracked per mode."""
        results = FilterResults()
        assert not results.contributes_to_gene_score()
        results.mark_contributing(AD)
        assert results.contributes_to_gene_score()
        assert results.contributes_under_mode(AD)
        assert not results.contributes_under_mode(AR)
        assert results.contributing_modes == {AD}

    def test_contribution_is_not_a_filter_result(self):
        """Test marking a contribution leaves the variant unfiltered."""
        results = FilterResults()
        results.mark_contributing(AR)
        assert results.is_unfiltered()
        assert results.filter_status_for_mode(AR) == FilterStatus.UNFILTERED
