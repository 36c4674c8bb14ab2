"""Data models for varprio."""

from varprio.models.annotation import TranscriptAnnotation
from varprio.models.effects import VariantEffect
from varprio.models.filters import FilterResult, FilterResults, FilterStatus, FilterType, ModeOutcome
from varprio.models.frequency import Frequency, FrequencyData, FrequencySource, RsId
from varprio.models.genome import GenomeAssembly, chromosome_name
from varprio.models.genotype import AlleleCall, SampleGenotype
from varprio.models.inheritance import ModeOfInheritance
from varprio.models.pathogenicity import (
    ClinSig,
    ClinVarData,
    PathogenicityData,
    PathogenicityScore,
    PathogenicitySource,
)
from varprio.models.variant_evaluation import VariantEvaluation

__all__ = [
    "VariantEvaluation",
    "GenomeAssembly",
    "chromosome_name",
    "AlleleCall",
    "SampleGenotype",
    "VariantEffect",
    "ModeOfInheritance",
    "TranscriptAnnotation",
    "Frequency",
    "FrequencyData",
    "FrequencySource",
    "RsId",
    "PathogenicityData",
    "PathogenicityScore",
    "PathogenicitySource",
    "ClinSig",
    "ClinVarData",
    "FilterResult",
    "FilterResults",
    "FilterStatus",
    "FilterType",
    "ModeOutcome",
]
