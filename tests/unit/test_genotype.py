"""Tests for genome assembly, genotype and variant effect models."""

import pytest
from pydantic import ValidationError

from varprio.models.effects import VariantEffect
from varprio.models.genome import GenomeAssembly, chromosome_name
from varprio.models.genotype import AlleleCall, SampleGenotype
from varprio.models.inheritance import ModeOfInheritance


class TestGenomeAssembly:
    """Tests for GenomeAssembly."""

    @pytest.mark.parametrize("value,expected", [
        ("hg19", GenomeAssembly.HG19),
        ("HG19", GenomeAssembly.HG19),
        ("GRCh37", GenomeAssembly.HG19),
        ("hg38", GenomeAssembly.HG38),
        ("grch38", GenomeAssembly.HG38),
    ])
    def test_from_value(self, value, expected):
        """Test names and GRC aliases resolve case-insensitively."""
        assert GenomeAssembly.from_value(value) is expected

    def test_from_value_unknown_raises(self):
        """Test that an unknown assembly is rejected."""
        with pytest.raises(ValueError, match="not recognised"):
            GenomeAssembly.from_value("hg18")

    def test_str_is_value(self):
        """Test the display form is the lower-case build name."""
        assert str(GenomeAssembly.HG38) == "hg38"


class TestChromosomeName:
    """Tests for chromosome display names."""

    @pytest.mark.parametrize("chromosome,expected", [
        (1, "1"),
        (22, "22"),
        (23, "X"),
        (24, "Y"),
        (25, "MT"),
    ])
    def test_chromosome_name(self, chromosome, expected):
        """Test integer chromosomes map to their display names."""
        assert chromosome_name(chromosome) == expected


class TestSampleGenotype:
    """Tests for SampleGenotype."""

    def test_het(self):
        """Test heterozygous genotype."""
        genotype = SampleGenotype.het()
        assert genotype.is_het()
        assert not genotype.is_hom_alt()
        assert str(genotype) == "0/1"

    def test_unphased_calls_are_sorted(self):
        """Test unphased genotypes compare equal regardless of call order."""
        assert SampleGenotype.of(AlleleCall.ALT, AlleleCall.REF) == SampleGenotype.het()

    def test_other_alt_sorts_first(self):
        """Test a 1/2 genotype renders with the other-alt marker first."""
        genotype = SampleGenotype.of(AlleleCall.ALT, AlleleCall.OTHER_ALT)
        assert str(genotype) == "-/1"
        assert genotype.is_het()

    def test_phased_keeps_order(self):
        """Test phased genotypes keep call order and render with '|'."""
        genotype = SampleGenotype.phased_of(AlleleCall.ALT, AlleleCall.REF)
        assert genotype.calls == (AlleleCall.ALT, AlleleCall.REF)
        assert str(genotype) == "1|0"
        assert genotype != SampleGenotype.het()

    def test_hom_ref_and_hom_alt(self):
        """Test homozygous predicates."""
        assert SampleGenotype.hom_ref().is_hom_ref()
        assert SampleGenotype.hom_alt().is_hom_alt()
        assert not SampleGenotype.hom_alt().is_het()
        assert str(SampleGenotype.hom_alt()) == "1/1"

    def test_no_call(self):
        """Test no-call genotype."""
        genotype = SampleGenotype.no_call()
        assert genotype.is_no_call()
        assert not genotype.is_het()
        assert str(genotype) == "./."

    def test_empty(self):
        """Test empty genotype renders as NA."""
        genotype = SampleGenotype.empty()
        assert genotype.is_empty()
        assert not genotype.is_no_call()
        assert str(genotype) == "NA"

    def test_haploid(self):
        """Test a single-call genotype."""
        genotype = SampleGenotype.of(AlleleCall.ALT)
        assert str(genotype) == "1"
        assert not genotype.is_hom_alt()

    def test_more_than_two_calls_rejected(self):
        """Test that a genotype holds at most two calls."""
        with pytest.raises(ValidationError, match="at most two"):
            SampleGenotype(calls=(AlleleCall.REF, AlleleCall.ALT, AlleleCall.ALT))

    def test_frozen(self):
        """Test genotypes are immutable."""
        genotype = SampleGenotype.het()
        with pytest.raises(ValidationError):
            genotype.phased = True


class TestVariantEffect:
    """Tests for VariantEffect policy lookups."""

    @pytest.mark.parametrize("effect,expected", [
        (VariantEffect.STOP_GAINED, 1.0),
        (VariantEffect.FRAMESHIFT_VARIANT, 0.95),
        (VariantEffect.SPLICE_DONOR_VARIANT, 0.9),
        (VariantEffect.INFRAME_DELETION, 0.85),
        (VariantEffect.SPLICE_REGION_VARIANT, 0.8),
        (VariantEffect.STOP_LOST, 0.7),
        (VariantEffect.MISSENSE_VARIANT, 0.6),
        (VariantEffect.SYNONYMOUS_VARIANT, 0.0),
        (VariantEffect.DOWNSTREAM_GENE_VARIANT, 0.0),
        (VariantEffect.SEQUENCE_VARIANT, 0.0),
    ])
    def test_default_pathogenicity_score(self, effect, expected):
        """Test default scores by effect."""
        assert effect.default_pathogenicity_score == expected

    def test_missense_like(self):
        """Test only missense is treated as missense-like."""
        assert VariantEffect.MISSENSE_VARIANT.is_missense_like()
        assert not VariantEffect.STOP_GAINED.is_missense_like()

    def test_inherently_pathogenic(self):
        """Test effects with a positive default are inherently pathogenic."""
        assert VariantEffect.STOP_GAINED.is_inherently_pathogenic()
        assert not VariantEffect.REGULATORY_REGION_VARIANT.is_inherently_pathogenic()

    def test_synonymous_ignores_predictors(self):
        """Test synonymous variants do not trust predictor output."""
        assert not VariantEffect.SYNONYMOUS_VARIANT.trusts_predictors()
        assert VariantEffect.REGULATORY_REGION_VARIANT.trusts_predictors()


class TestModeOfInheritance:
    """Tests for ModeOfInheritance."""

    def test_specific_modes_exclude_any(self):
        """Test ANY is not a specific mode."""
        modes = ModeOfInheritance.specific_modes()
        assert ModeOfInheritance.ANY not in modes
        assert len(modes) == len(ModeOfInheritance) - 1
