"""PathogenicityData - per-variant collection of predictor scores.

Holds at most one PathogenicityScore per source plus any ClinVar record.
The variant-level pathogenicity score is selected, not averaged, because a
single strong damaging signal should not be diluted by weaker predictors.

Selection (``score_for``):
    1. Whitelisted variants score 1.0.
    2. Missense-like effects take the highest missense predictor score
       present; ties go to the earlier predictor in the priority order.
    3. Other effects take the highest general-purpose predictor score
       present, floored at the effect's default score.
    4. With no trusted predictor, the effect's default score is used.
"""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from varprio.config.constants import (
    MISSENSE_PREDICTOR_PRIORITY,
    NON_MISSENSE_PREDICTORS,
    NON_PATHOGENIC_SCORE,
)
from varprio.config.debug import get_logger
from varprio.models.effects import VariantEffect
from varprio.models.pathogenicity.base import PathogenicityScore, PathogenicitySource
from varprio.models.pathogenicity.clinvar import ClinVarData

logger = get_logger(__name__)

DEFAULT_MISSENSE_PRIORITY: tuple[PathogenicitySource, ...] = tuple(
    PathogenicitySource[name] for name in MISSENSE_PREDICTOR_PRIORITY
)
GENERAL_PURPOSE_PREDICTORS: tuple[PathogenicitySource, ...] = tuple(
    PathogenicitySource[name] for name in NON_MISSENSE_PREDICTORS
)


def _most_pathogenic(scores: Iterable[PathogenicityScore]) -> PathogenicityScore | None:
    """Highest normalised score; the first one seen wins an exact tie."""
    best = None
    for candidate in scores:
        if best is None or candidate.score > best.score:
            best = candidate
    return best


class PathogenicityData(BaseModel):
    """Predicted pathogenicity scores and ClinVar data for one variant."""

    model_config = ConfigDict(frozen=True)

    clinvar_data: ClinVarData = Field(default_factory=ClinVarData.empty, description="ClinVar record, not scored")
    scores: dict[PathogenicitySource, PathogenicityScore] = Field(
        default_factory=dict, description="Predictor score keyed by its source"
    )

    @field_validator("scores")
    @classmethod
    def _keys_match_sources(
        cls, scores: dict[PathogenicitySource, PathogenicityScore]
    ) -> dict[PathogenicitySource, PathogenicityScore]:
        for source, score in scores.items():
            if score.source != source:
                raise ValueError(f"{score.source.value} score stored under {source.value}")
        return scores

    @classmethod
    def of(cls, *scores: PathogenicityScore, clinvar_data: ClinVarData | None = None) -> "PathogenicityData":
        """Build from individual scores; a later score for a source replaces an earlier one."""
        by_source = {score.source: score for score in scores}
        return cls(
            clinvar_data=clinvar_data if clinvar_data is not None else ClinVarData.empty(),
            scores=by_source,
        )

    @classmethod
    def empty(cls) -> "PathogenicityData":
        return cls()

    def __hash__(self) -> int:
        return hash((self.clinvar_data, tuple(self.predicted_scores)))

    def has_clinvar_data(self) -> bool:
        return not self.clinvar_data.is_empty()

    def has_predicted_score(self, source: PathogenicitySource | None = None) -> bool:
        """Any predictor score at all, or one from the given source."""
        if source is None:
            return bool(self.scores)
        return source in self.scores

    def get_predicted_score(self, source: PathogenicitySource) -> PathogenicityScore | None:
        return self.scores.get(source)

    @property
    def predicted_scores(self) -> list[PathogenicityScore]:
        """Scores in source declaration order."""
        return [self.scores[source] for source in PathogenicitySource if source in self.scores]

    @property
    def most_pathogenic_score(self) -> PathogenicityScore | None:
        """Highest score over every predictor regardless of variant effect.

        Ties go to the missense priority order, then source declaration order.
        """
        ranked = [self.scores[source] for source in DEFAULT_MISSENSE_PRIORITY if source in self.scores]
        ranked += [score for score in self.predicted_scores if score.source not in DEFAULT_MISSENSE_PRIORITY]
        return _most_pathogenic(ranked)

    @computed_field
    @property
    def score(self) -> float:
        """Normalised value of the most pathogenic score, 0 when there are none."""
        most_pathogenic = self.most_pathogenic_score
        return most_pathogenic.score if most_pathogenic is not None else NON_PATHOGENIC_SCORE

    def _trusted_scores_for(
        self,
        variant_effect: VariantEffect,
        missense_priority: Sequence[PathogenicitySource] | None = None,
    ) -> list[PathogenicityScore]:
        if not variant_effect.trusts_predictors():
            return []
        if variant_effect.is_missense_like():
            sources = missense_priority if missense_priority is not None else DEFAULT_MISSENSE_PRIORITY
        else:
            sources = GENERAL_PURPOSE_PREDICTORS
        return [self.scores[source] for source in sources if source in self.scores]

    def most_pathogenic_score_for(
        self,
        variant_effect: VariantEffect,
        missense_priority: Sequence[PathogenicitySource] | None = None,
    ) -> PathogenicityScore | None:
        """Most pathogenic score among the predictors trusted for this effect.

        Args:
            variant_effect: Consequence category of the variant.
            missense_priority: Optional alternative priority order for
                missense-like effects. Defaults to MISSENSE_PREDICTOR_PRIORITY.

        Returns:
            The selected score, or None if no trusted predictor is present.
        """
        return _most_pathogenic(self._trusted_scores_for(variant_effect, missense_priority))

    def has_damaging_score_for(self, variant_effect: VariantEffect) -> bool:
        """Any trusted predictor for this effect exceeds its own threshold."""
        return any(score.is_damaging() for score in self._trusted_scores_for(variant_effect))

    def score_for(self, variant_effect: VariantEffect, whitelisted: bool = False) -> float:
        """Variant-level pathogenicity score in [0, 1] for a variant of the given effect."""
        if whitelisted:
            return 1.0

        default_score = variant_effect.default_pathogenicity_score
        selected = self.most_pathogenic_score_for(variant_effect)
        if selected is None:
            logger.debug(
                "No trusted predictor for %s, using default score %s", variant_effect.name, default_score
            )
            return default_score

        if variant_effect.is_missense_like():
            return selected.score
        return max(selected.score, default_score)
