"""VariantEvaluation - the per-allele record scored and ranked by varprio.

Created once per called allele with its identity fixed, then enriched in
place by later pipeline stages (frequency, pathogenicity, filters, inheritance
compatibility, gene-score contribution, whitelisting). Each stage owns the
record exclusively while it mutates it; reads are safe once a stage is done.

Example:
    >>> variant = VariantEvaluation(chromosome=1, position=12345, ref="A", alt="T",
    ...                             variant_effect=VariantEffect.STOP_GAINED)
    >>> variant.variant_score
    1.0
"""

from collections.abc import Iterable
from enum import Enum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, computed_field, field_validator

from varprio.config.constants import DEFAULT_GENE_SYMBOL, DEFAULT_SAMPLE_NAME
from varprio.config.debug import get_logger
from varprio.models.annotation import TranscriptAnnotation
from varprio.models.effects import VariantEffect
from varprio.models.filters import FilterResult, FilterResults, FilterStatus, FilterType
from varprio.models.frequency import FrequencyData
from varprio.models.genome import GenomeAssembly, chromosome_name
from varprio.models.genotype import SampleGenotype
from varprio.models.inheritance import ModeOfInheritance
from varprio.models.pathogenicity import PathogenicityData

logger = get_logger(__name__)


def single_sample_het_genotype() -> dict[str, SampleGenotype]:
    """Genotypes used when none are supplied: one heterozygous sample."""
    return {DEFAULT_SAMPLE_NAME: SampleGenotype.het()}


def _enum_list(members: Iterable[Enum], enum_type: type[Enum]) -> str:
    """Render enum members as [A, B] in declaration order."""
    present = set(members)
    return "[" + ", ".join(member.name for member in enum_type if member in present) + "]"


@total_ordering
class VariantEvaluation(BaseModel):
    """A called variant allele with its annotations, filter outcomes and scores.

    Identity (chromosome, position, ref, alt, alt_allele_id, genome_assembly)
    is frozen. Two evaluations are equal when chromosome, position, ref, alt
    and assembly match. Natural ordering is by chromosome, position, ref, alt,
    with the assembly breaking any remaining tie.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Identity
    chromosome: int = Field(..., frozen=True, description="1-22, 23=X, 24=Y, 25=MT")
    position: int = Field(..., frozen=True, description="1-based start position")
    ref: str = Field(..., frozen=True, description="Reference allele")
    alt: str = Field(..., frozen=True, description="Alternate allele")
    alt_allele_id: int = Field(0, frozen=True, ge=0, description="0-based index of alt at a multi-allelic site")
    genome_assembly: GenomeAssembly = Field(GenomeAssembly.HG19, frozen=True)
    chromosome_name: str | None = Field(
        None, frozen=True, validate_default=True, description="Display name, derived from chromosome if unset"
    )

    # Call and gene context
    quality: float = Field(0.0, description="Call quality")
    gene_symbol: str = Field(DEFAULT_GENE_SYMBOL, description="First gene symbol, '.' when unknown")
    gene_id: str = Field("", description="Gene identifier")
    variant_effect: VariantEffect = Field(VariantEffect.SEQUENCE_VARIANT)
    annotations: list[TranscriptAnnotation] = Field(default_factory=list)
    sample_genotypes: dict[str, SampleGenotype] = Field(default_factory=single_sample_het_genotype)

    # Annotation and analysis state
    frequency_data: FrequencyData = Field(default_factory=FrequencyData.empty)
    pathogenicity_data: PathogenicityData = Field(default_factory=PathogenicityData.empty)
    whitelisted: bool = Field(False, description="Force maximal frequency and pathogenicity scores")
    compatible_inheritance_modes: set[ModeOfInheritance] = Field(default_factory=set)
    filters: FilterResults = Field(default_factory=FilterResults)

    @field_validator("genome_assembly", mode="before")
    @classmethod
    def _resolve_assembly(cls, value):
        if isinstance(value, str) and not isinstance(value, GenomeAssembly):
            return GenomeAssembly.from_value(value)
        return value

    @field_validator("chromosome_name")
    @classmethod
    def _default_chromosome_name(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None and "chromosome" in info.data:
            return chromosome_name(info.data["chromosome"])
        return value

    @field_validator("gene_symbol")
    @classmethod
    def _first_gene_symbol(cls, value: str) -> str:
        if not value:
            raise ValueError("Variant gene symbol cannot be empty")
        first = value.split(",")[0].strip()
        return first or DEFAULT_GENE_SYMBOL

    @field_validator("sample_genotypes")
    @classmethod
    def _default_sample_genotypes(cls, value: dict[str, SampleGenotype]) -> dict[str, SampleGenotype]:
        return value or single_sample_het_genotype()

    # --- Identity and ordering ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariantEvaluation):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: "VariantEvaluation") -> bool:
        if not isinstance(other, VariantEvaluation):
            return NotImplemented
        return self.natural_key() < other.natural_key()

    def _identity(self) -> tuple:
        return (self.chromosome, self.position, self.ref, self.alt, self.genome_assembly)

    def natural_key(self) -> tuple[int, int, str, str, str]:
        """Sort key for the natural (positional) ordering; assembly only breaks ties."""
        return (self.chromosome, self.position, self.ref, self.alt, self.genome_assembly.value)

    # --- Genotypes and annotations ---

    def get_sample_genotype(self, sample_name: str) -> SampleGenotype:
        """Genotype of a sample, or an empty genotype if the sample is unknown."""
        return self.sample_genotypes.get(sample_name, SampleGenotype.empty())

    @property
    def genotype_string(self) -> str:
        """Sample genotypes in sample order, e.g. '0/1:0/0:1/1'."""
        return ":".join(str(genotype) for genotype in self.sample_genotypes.values())

    def has_transcript_annotations(self) -> bool:
        return bool(self.annotations)

    # --- Annotation stages ---

    def set_variant_effect(self, variant_effect: VariantEffect) -> None:
        self.variant_effect = variant_effect

    def set_frequency_data(self, frequency_data: FrequencyData) -> None:
        """Replace the whole frequency map."""
        if self.frequency_data.is_represented_in_database():
            logger.debug("Replacing frequency data of %s", self._label())
        self.frequency_data = frequency_data

    def set_pathogenicity_data(self, pathogenicity_data: PathogenicityData) -> None:
        """Replace all predictor scores and ClinVar data."""
        if self.pathogenicity_data.has_predicted_score() or self.pathogenicity_data.has_clinvar_data():
            logger.debug("Replacing pathogenicity data of %s", self._label())
        self.pathogenicity_data = pathogenicity_data

    def set_whitelisted(self, whitelisted: bool) -> None:
        self.whitelisted = whitelisted

    def _label(self) -> str:
        return f"{self.chromosome_name}-{self.position}-{self.ref}-{self.alt}"

    # --- Scores ---

    @computed_field
    @property
    def frequency_score(self) -> float:
        return self.frequency_data.score_for(whitelisted=self.whitelisted)

    @computed_field
    @property
    def pathogenicity_score(self) -> float:
        return self.pathogenicity_data.score_for(self.variant_effect, whitelisted=self.whitelisted)

    @computed_field
    @property
    def variant_score(self) -> float:
        """Frequency score x pathogenicity score, in [0, 1]. Filtering never changes it."""
        return self.frequency_score * self.pathogenicity_score

    def is_predicted_pathogenic(self) -> bool:
        """Effect is inherently damaging, or a missense predictor calls it damaging."""
        if self.whitelisted or self.variant_effect.is_inherently_pathogenic():
            return True
        if self.variant_effect.is_missense_like():
            return self.pathogenicity_data.has_damaging_score_for(self.variant_effect)
        return False

    # --- Filters ---

    def add_filter_result(
        self, result: FilterResult, modes: Iterable[ModeOfInheritance] | None = None
    ) -> None:
        """Record a filter outcome under the given modes (ANY if none given)."""
        self.filters.add(result, modes)

    @property
    def failed_filter_types(self) -> set[FilterType]:
        return self.filters.failed_filter_types

    @property
    def passed_filter_types(self) -> set[FilterType]:
        return self.filters.passed_filter_types

    def failed_filter_types_for_mode(self, mode: ModeOfInheritance) -> set[FilterType]:
        """Failed filter types under a mode, including INHERITANCE_FILTER if incompatible."""
        failed = self.filters.failed_filter_types_for_mode(mode)
        if not self.is_compatible_with(mode):
            failed.add(FilterType.INHERITANCE_FILTER)
        return failed

    def passed_filter_types_for_mode(self, mode: ModeOfInheritance) -> set[FilterType]:
        passed = self.filters.passed_filter_types_for_mode(mode)
        if not self.is_compatible_with(mode):
            passed.discard(FilterType.INHERITANCE_FILTER)
        return passed

    @computed_field
    @property
    def filter_status(self) -> FilterStatus:
        return self.filters.filter_status

    def filter_status_for_mode(self, mode: ModeOfInheritance) -> FilterStatus:
        if self.filters.is_unfiltered():
            return FilterStatus.UNFILTERED
        if self.failed_filter_types_for_mode(mode):
            return FilterStatus.FAILED
        if self.passed_filter_types_for_mode(mode):
            return FilterStatus.PASSED
        return FilterStatus.UNFILTERED

    def passed_filters(self) -> bool:
        return self.filters.passed()

    def passed_filter(self, filter_type: FilterType) -> bool:
        return self.filters.passed_filter(filter_type)

    # --- Inheritance ---

    def set_compatible_inheritance_modes(self, modes: Iterable[ModeOfInheritance]) -> None:
        self.compatible_inheritance_modes = set(modes)

    def is_compatible_with(self, mode: ModeOfInheritance) -> bool:
        """ANY is always compatible; other modes only if set by inheritance analysis."""
        return mode == ModeOfInheritance.ANY or mode in self.compatible_inheritance_modes

    def set_contributes_to_gene_score_under_mode(self, mode: ModeOfInheritance) -> None:
        self.filters.mark_contributing(mode)

    def contributes_to_gene_score(self) -> bool:
        """Contributes to its gene's score under at least one mode."""
        return self.filters.contributes_to_gene_score()

    def contributes_to_gene_score_under_mode(self, mode: ModeOfInheritance) -> bool:
        return self.filters.contributes_under_mode(mode)

    # --- Display ---

    def __str__(self) -> str:
        contributes = " *" if self.contributes_to_gene_score() else ""
        genotypes = ", ".join(f"{sample}={genotype}" for sample, genotype in self.sample_genotypes.items())
        return (
            f"VariantEvaluation{{assembly={self.genome_assembly.value} chr={self.chromosome} "
            f"pos={self.position} ref={self.ref} alt={self.alt} qual={self.quality} "
            f"{self.variant_effect.name}{contributes} score={self.variant_score} "
            f"{self.filter_status.value} "
            f"failedFilters={_enum_list(self.failed_filter_types, FilterType)} "
            f"passedFilters={_enum_list(self.passed_filter_types, FilterType)} "
            f"compatibleWith={_enum_list(self.compatible_inheritance_modes, ModeOfInheritance)} "
            f"sampleGenotypes={{{genotypes}}}}}"
        )
