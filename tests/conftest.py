"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def make_variant():
    """Factory for variant evaluations with defaults for the identity fields."""
    from varprio.models.variant_evaluation import VariantEvaluation

    def _make(chromosome=1, position=1, ref="C", alt="T", **kwargs):
        return VariantEvaluation(chromosome=chromosome, position=position, ref=ref, alt=alt, **kwargs)

    return _make


@pytest.fixture
def sample_variant(make_variant):
    """Unannotated variant on chr1 with a quality of 2.2."""
    return make_variant(quality=2.2)


@pytest.fixture
def missense_variant(make_variant):
    """Missense variant with no predictor scores."""
    from varprio.models.effects import VariantEffect

    return make_variant(
        chromosome=10,
        position=123353298,
        ref="G",
        alt="C",
        gene_symbol="FGFR2",
        variant_effect=VariantEffect.MISSENSE_VARIANT,
    )


@pytest.fixture
def rare_frequency_data():
    """dbSNP-listed variant seen at 0.02% in ESP."""
    from varprio.models.frequency import Frequency, FrequencyData, FrequencySource, RsId

    return FrequencyData.of(Frequency.of(FrequencySource.ESP_ALL, 0.02), rs_id=RsId.of(12345))


@pytest.fixture
def damaging_missense_scores():
    """Missense predictor scores all beyond their thresholds."""
    from varprio.models.pathogenicity import PathogenicityData, PathogenicityScore

    return PathogenicityData.of(
        PathogenicityScore.polyphen(0.998),
        PathogenicityScore.mutation_taster(0.99),
        PathogenicityScore.sift(0.01),
    )
