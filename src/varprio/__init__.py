"""varprio - variant evaluation, scoring and ranking for rare-disease prioritisation.

Public API:
    >>> from varprio import VariantEvaluation, VariantEffect, sort_by_rank
    >>> variant = VariantEvaluation(chromosome=1, position=12345, ref="A", alt="T",
    ...                             variant_effect=VariantEffect.STOP_GAINED)
    >>> ranked = sort_by_rank([variant])
"""

__version__ = "0.1.0"

from varprio.comparators import compare_by_rank, compare_natural, natural_sort_key, rank_sort_key, sort_by_rank
from varprio.models import (
    FilterResult,
    FilterStatus,
    FilterType,
    FrequencyData,
    GenomeAssembly,
    ModeOfInheritance,
    PathogenicityData,
    SampleGenotype,
    VariantEffect,
    VariantEvaluation,
)
from varprio.whitelist import AlleleKey, InMemoryVariantWhiteList, VariantWhiteList, apply_whitelist

__all__ = [
    # Version
    "__version__",
    # Core model
    "VariantEvaluation",
    "GenomeAssembly",
    "VariantEffect",
    "ModeOfInheritance",
    "SampleGenotype",
    "FrequencyData",
    "PathogenicityData",
    "FilterResult",
    "FilterStatus",
    "FilterType",
    # Ordering
    "natural_sort_key",
    "rank_sort_key",
    "compare_natural",
    "compare_by_rank",
    "sort_by_rank",
    # Whitelist
    "AlleleKey",
    "VariantWhiteList",
    "InMemoryVariantWhiteList",
    "apply_whitelist",
]
