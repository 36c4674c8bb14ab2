from varprio.models.pathogenicity.base import PathogenicityScore, PathogenicitySource
from varprio.models.pathogenicity.clinvar import ClinSig, ClinVarData
from varprio.models.pathogenicity.data import (
    DEFAULT_MISSENSE_PRIORITY,
    GENERAL_PURPOSE_PREDICTORS,
    PathogenicityData,
)

__all__ = [
    # Score types
    "PathogenicitySource",
    "PathogenicityScore",
    # ClinVar
    "ClinSig",
    "ClinVarData",
    # Aggregate
    "PathogenicityData",
    "DEFAULT_MISSENSE_PRIORITY",
    "GENERAL_PURPOSE_PREDICTORS",
]
