"""Variant effect (consequence) categories.

Values are Sequence Ontology terms. The category of a variant is supplied by
the transcript annotation stage and selects which pathogenicity predictors
are trusted for it (see ``varprio.config.constants``).
"""

from enum import Enum

from varprio.config.constants import (
    MISSENSE_LIKE_EFFECTS,
    NON_PATHOGENIC_SCORE,
    PREDICTOR_EXCLUDED_EFFECTS,
    VARIANT_EFFECT_DEFAULT_SCORES,
)


class VariantEffect(str, Enum):
    """Sequence Ontology consequence of a variant, most severe first."""

    TRANSCRIPT_ABLATION = "transcript_ablation"
    EXON_LOSS_VARIANT = "exon_loss_variant"
    FRAMESHIFT_ELONGATION = "frameshift_elongation"
    FRAMESHIFT_TRUNCATION = "frameshift_truncation"
    FRAMESHIFT_VARIANT = "frameshift_variant"
    INTERNAL_FEATURE_ELONGATION = "internal_feature_elongation"
    FEATURE_TRUNCATION = "feature_truncation"
    STOP_GAINED = "stop_gained"
    STOP_LOST = "stop_lost"
    START_LOST = "start_lost"
    SPLICE_ACCEPTOR_VARIANT = "splice_acceptor_variant"
    SPLICE_DONOR_VARIANT = "splice_donor_variant"
    MNV = "mnv"
    INFRAME_INSERTION = "inframe_insertion"
    DISRUPTIVE_INFRAME_INSERTION = "disruptive_inframe_insertion"
    INFRAME_DELETION = "inframe_deletion"
    DISRUPTIVE_INFRAME_DELETION = "disruptive_inframe_deletion"
    MISSENSE_VARIANT = "missense_variant"
    SPLICE_REGION_VARIANT = "splice_region_variant"
    STOP_RETAINED_VARIANT = "stop_retained_variant"
    INITIATOR_CODON_VARIANT = "initiator_codon_variant"
    SYNONYMOUS_VARIANT = "synonymous_variant"
    CODING_SEQUENCE_VARIANT = "coding_sequence_variant"
    FIVE_PRIME_UTR_EXON_VARIANT = "5_prime_UTR_exon_variant"
    THREE_PRIME_UTR_EXON_VARIANT = "3_prime_UTR_exon_variant"
    NON_CODING_TRANSCRIPT_EXON_VARIANT = "non_coding_transcript_exon_variant"
    CODING_TRANSCRIPT_INTRON_VARIANT = "coding_transcript_intron_variant"
    NON_CODING_TRANSCRIPT_INTRON_VARIANT = "non_coding_transcript_intron_variant"
    UPSTREAM_GENE_VARIANT = "upstream_gene_variant"
    DOWNSTREAM_GENE_VARIANT = "downstream_gene_variant"
    INTERGENIC_VARIANT = "intergenic_variant"
    TF_BINDING_SITE_VARIANT = "TF_binding_site_variant"
    REGULATORY_REGION_VARIANT = "regulatory_region_variant"
    SEQUENCE_VARIANT = "sequence_variant"

    @property
    def default_pathogenicity_score(self) -> float:
        """Score used when no trusted predictor has scored the variant."""
        return VARIANT_EFFECT_DEFAULT_SCORES.get(self.name, NON_PATHOGENIC_SCORE)

    def is_missense_like(self) -> bool:
        return self.name in MISSENSE_LIKE_EFFECTS

    def is_inherently_pathogenic(self) -> bool:
        """Effect implies pathogenicity by itself, with no predictor needed."""
        return self.default_pathogenicity_score > NON_PATHOGENIC_SCORE

    def trusts_predictors(self) -> bool:
        """False where predictor output is known to be unreliable for this effect."""
        return self.name not in PREDICTOR_EXCLUDED_EFFECTS
