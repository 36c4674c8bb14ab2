"""Predictor sources and individual pathogenicity scores."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from varprio.config.constants import (
    LOWER_IS_WORSE_PREDICTORS,
    PHRED_SCALED_PREDICTORS,
    PREDICTOR_THRESHOLDS,
)


class PathogenicitySource(str, Enum):
    """Computational tool that produced a pathogenicity prediction."""

    POLYPHEN = "POLYPHEN"
    MUTATION_TASTER = "MUTATION_TASTER"
    SIFT = "SIFT"
    CADD = "CADD"
    REMM = "REMM"
    REVEL = "REVEL"
    MVP = "MVP"
    ALPHA_MISSENSE = "ALPHA_MISSENSE"
    SPLICE_AI = "SPLICE_AI"

    @property
    def threshold(self) -> float:
        """Raw score beyond which this predictor calls a variant damaging."""
        return PREDICTOR_THRESHOLDS[self.name]

    def is_lower_worse(self) -> bool:
        return self.name in LOWER_IS_WORSE_PREDICTORS

    def is_phred_scaled(self) -> bool:
        return self.name in PHRED_SCALED_PREDICTORS


class PathogenicityScore(BaseModel):
    """A single predictor's raw output and its normalised 0-1 score.

    ``score`` is always "higher = more pathogenic" so scores from different
    predictors can be compared directly. Example:
        >>> PathogenicityScore.sift(0.05).score
        0.95
    """

    model_config = ConfigDict(frozen=True)

    source: PathogenicitySource
    raw_score: float = Field(..., ge=0.0, description="Score on the predictor's own scale")

    @model_validator(mode="after")
    def _raw_score_in_range(self) -> "PathogenicityScore":
        if not self.source.is_phred_scaled() and self.raw_score > 1.0:
            raise ValueError(f"{self.source.value} score must be between 0 and 1, got {self.raw_score}")
        return self

    @classmethod
    def of(cls, source: PathogenicitySource, raw_score: float) -> "PathogenicityScore":
        return cls(source=source, raw_score=raw_score)

    @classmethod
    def polyphen(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.POLYPHEN, raw_score)

    @classmethod
    def mutation_taster(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.MUTATION_TASTER, raw_score)

    @classmethod
    def sift(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.SIFT, raw_score)

    @classmethod
    def cadd(cls, phred_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.CADD, phred_score)

    @classmethod
    def remm(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.REMM, raw_score)

    @classmethod
    def revel(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.REVEL, raw_score)

    @classmethod
    def mvp(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.MVP, raw_score)

    @classmethod
    def alpha_missense(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.ALPHA_MISSENSE, raw_score)

    @classmethod
    def splice_ai(cls, raw_score: float) -> "PathogenicityScore":
        return cls.of(PathogenicitySource.SPLICE_AI, raw_score)

    @computed_field
    @property
    def score(self) -> float:
        """Normalised score in [0, 1], higher is more pathogenic."""
        if self.source.is_lower_worse():
            return 1.0 - self.raw_score
        if self.source.is_phred_scaled():
            return 1.0 - 10 ** (-self.raw_score / 10)
        return self.raw_score

    def is_damaging(self) -> bool:
        """Raw score lies beyond the predictor's threshold."""
        if self.source.is_lower_worse():
            return self.raw_score < self.source.threshold
        return self.raw_score > self.source.threshold

    def __str__(self) -> str:
        return f"{self.source.value}: {self.raw_score:.3f}"
