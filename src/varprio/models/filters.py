"""Filter bookkeeping for a variant.

Filters run independently of each other and of scoring. Each outcome is
recorded under one or more inheritance-mode buckets (ANY by default), so the
status of a variant can be read for every mode without re-running filters.

ARCHITECTURE:
    FilterResults.outcomes: dict[ModeOfInheritance, ModeOutcome]
    ModeOutcome: passed / failed filter types + gene-score contribution flag

    ANY is stored like any other bucket. It only differs in derivation: for a
    specific mode, the mode's own outcome for a filter type overrides the ANY
    outcome for that type, and modes never filtered fall back to ANY.
"""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from varprio.models.inheritance import ModeOfInheritance


class FilterType(str, Enum):
    """Kind of filter that produced a result."""

    FAILED_VARIANT_FILTER = "FAILED_VARIANT_FILTER"
    QUALITY_FILTER = "QUALITY_FILTER"
    INTERVAL_FILTER = "INTERVAL_FILTER"
    BED_FILTER = "BED_FILTER"
    GENE_ID_FILTER = "GENE_ID_FILTER"
    VARIANT_EFFECT_FILTER = "VARIANT_EFFECT_FILTER"
    REGULATORY_FEATURE_FILTER = "REGULATORY_FEATURE_FILTER"
    KNOWN_VARIANT_FILTER = "KNOWN_VARIANT_FILTER"
    FREQUENCY_FILTER = "FREQUENCY_FILTER"
    PATHOGENICITY_FILTER = "PATHOGENICITY_FILTER"
    INHERITANCE_FILTER = "INHERITANCE_FILTER"
    PRIORITY_SCORE_FILTER = "PRIORITY_SCORE_FILTER"


class FilterStatus(str, Enum):
    """Aggregate filter outcome of a variant."""

    UNFILTERED = "UNFILTERED"
    PASSED = "PASSED"
    FAILED = "FAILED"


class FilterResult(BaseModel):
    """Outcome of running one filter against one variant."""

    model_config = ConfigDict(frozen=True)

    filter_type: FilterType
    status: FilterStatus = Field(..., description="PASSED or FAILED")

    @field_validator("status")
    @classmethod
    def _pass_or_fail(cls, status: FilterStatus) -> FilterStatus:
        if status == FilterStatus.UNFILTERED:
            raise ValueError("A filter result must be PASSED or FAILED")
        return status

    @classmethod
    def pass_(cls, filter_type: FilterType) -> "FilterResult":
        return cls(filter_type=filter_type, status=FilterStatus.PASSED)

    @classmethod
    def fail(cls, filter_type: FilterType) -> "FilterResult":
        return cls(filter_type=filter_type, status=FilterStatus.FAILED)

    def passed(self) -> bool:
        return self.status == FilterStatus.PASSED

    def failed(self) -> bool:
        return self.status == FilterStatus.FAILED


def _status_of(passed: set[FilterType], failed: set[FilterType]) -> FilterStatus:
    if failed:
        return FilterStatus.FAILED
    if passed:
        return FilterStatus.PASSED
    return FilterStatus.UNFILTERED


class ModeOutcome(BaseModel):
    """Filter and gene-score outcome of a variant under one inheritance mode."""

    passed: set[FilterType] = Field(default_factory=set)
    failed: set[FilterType] = Field(default_factory=set)
    contributes_to_gene_score: bool = False

    def record(self, result: FilterResult) -> None:
        """Last write wins: a filter type is never both passed and failed."""
        if result.passed():
            self.failed.discard(result.filter_type)
            self.passed.add(result.filter_type)
        else:
            self.passed.discard(result.filter_type)
            self.failed.add(result.filter_type)

    def has_results(self) -> bool:
        return bool(self.passed or self.failed)

    @property
    def status(self) -> FilterStatus:
        return _status_of(self.passed, self.failed)


class FilterResults(BaseModel):
    """Per-mode filter outcomes and gene-score contribution flags of a variant."""

    outcomes: dict[ModeOfInheritance, ModeOutcome] = Field(default_factory=dict)

    @classmethod
    def of(cls, *results: FilterResult) -> "FilterResults":
        """Results recorded under ANY."""
        filter_results = cls()
        for result in results:
            filter_results.add(result)
        return filter_results

    def _outcome(self, mode: ModeOfInheritance) -> ModeOutcome:
        """Outcome for a mode, created on first write."""
        if mode not in self.outcomes:
            self.outcomes[mode] = ModeOutcome()
        return self.outcomes[mode]

    def add(self, result: FilterResult, modes: Iterable[ModeOfInheritance] | None = None) -> None:
        """Record a filter result under the given modes (ANY if none given)."""
        for mode in modes or (ModeOfInheritance.ANY,):
            self._outcome(mode).record(result)

    def is_unfiltered(self) -> bool:
        """No filter result has been recorded under any mode."""
        return not any(outcome.has_results() for outcome in self.outcomes.values())

    @property
    def failed_filter_types(self) -> set[FilterType]:
        return self.failed_filter_types_for_mode(ModeOfInheritance.ANY)

    @property
    def passed_filter_types(self) -> set[FilterType]:
        return self.passed_filter_types_for_mode(ModeOfInheritance.ANY)

    def failed_filter_types_for_mode(self, mode: ModeOfInheritance) -> set[FilterType]:
        """Failed filter types for a mode, falling back to ANY per filter type."""
        any_outcome = self.outcomes.get(ModeOfInheritance.ANY, ModeOutcome())
        failed = set(any_outcome.failed)
        mode_outcome = self.outcomes.get(mode)
        if mode != ModeOfInheritance.ANY and mode_outcome is not None:
            failed -= mode_outcome.passed
            failed |= mode_outcome.failed
        return failed

    def passed_filter_types_for_mode(self, mode: ModeOfInheritance) -> set[FilterType]:
        """Passed filter types for a mode, falling back to ANY per filter type."""
        any_outcome = self.outcomes.get(ModeOfInheritance.ANY, ModeOutcome())
        passed = set(any_outcome.passed)
        mode_outcome = self.outcomes.get(mode)
        if mode != ModeOfInheritance.ANY and mode_outcome is not None:
            passed -= mode_outcome.failed
            passed |= mode_outcome.passed
        return passed

    @property
    def filter_status(self) -> FilterStatus:
        return self.filter_status_for_mode(ModeOfInheritance.ANY)

    def filter_status_for_mode(self, mode: ModeOfInheritance) -> FilterStatus:
        return _status_of(self.passed_filter_types_for_mode(mode), self.failed_filter_types_for_mode(mode))

    def passed(self) -> bool:
        """True unless a filter failed under ANY."""
        return not self.failed_filter_types

    def passed_filter(self, filter_type: FilterType) -> bool:
        return filter_type in self.passed_filter_types

    def mark_contributing(self, mode: ModeOfInheritance) -> None:
        self._outcome(mode).contributes_to_gene_score = True

    def contributes_under_mode(self, mode: ModeOfInheritance) -> bool:
        outcome = self.outcomes.get(mode)
        return outcome is not None and outcome.contributes_to_gene_score

    @property
    def contributing_modes(self) -> set[ModeOfInheritance]:
        return {mode for mode, outcome in self.outcomes.items() if outcome.contributes_to_gene_score}

    def contributes_to_gene_score(self) -> bool:
        return bool(self.contributing_modes)
