from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ClinSig(str, Enum):
    """ClinVar clinical significance."""

    BENIGN = "BENIGN"
    BENIGN_OR_LIKELY_BENIGN = "BENIGN_OR_LIKELY_BENIGN"
    LIKELY_BENIGN = "LIKELY_BENIGN"
    UNCERTAIN_SIGNIFICANCE = "UNCERTAIN_SIGNIFICANCE"
    LIKELY_PATHOGENIC = "LIKELY_PATHOGENIC"
    PATHOGENIC_OR_LIKELY_PATHOGENIC = "PATHOGENIC_OR_LIKELY_PATHOGENIC"
    PATHOGENIC = "PATHOGENIC"
    CONFLICTING_PATHOGENICITY_INTERPRETATIONS = "CONFLICTING_PATHOGENICITY_INTERPRETATIONS"
    AFFECTS = "AFFECTS"
    ASSOCIATION = "ASSOCIATION"
    DRUG_RESPONSE = "DRUG_RESPONSE"
    OTHER = "OTHER"
    NOT_PROVIDED = "NOT_PROVIDED"


class ClinVarData(BaseModel):
    """ClinVar record for a variant. Reported alongside, never scored."""

    model_config = ConfigDict(frozen=True)

    variation_id: str = ""
    primary_interpretation: ClinSig = ClinSig.NOT_PROVIDED
    secondary_interpretations: frozenset[ClinSig] = Field(default_factory=frozenset)
    review_status: str = ""
    conditions: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "ClinVarData":
        return cls()

    def is_empty(self) -> bool:
        return self == ClinVarData.empty()

    def is_pathogenic_or_likely_pathogenic(self) -> bool:
        return self.primary_interpretation in {
            ClinSig.PATHOGENIC,
            ClinSig.PATHOGENIC_OR_LIKELY_PATHOGENIC,
            ClinSig.LIKELY_PATHOGENIC,
        }
