"""Centralized scoring policy for varprio.

This module consolidates the hardcoded policy tables used by the scoring core:
- Default pathogenicity score per variant effect
- Predictor thresholds, directionality and normalisation
- Which predictors are trusted for which effect categories
- The population frequency curve

Tables are keyed by enum member *names* so that this module has no imports
and can be read (and diffed) on its own.
"""

# =============================================================================
# VARIANT EFFECT DEFAULT SCORES
# =============================================================================
# Score used when no predictor applies to a variant. Effects missing from this
# table score NON_PATHOGENIC_SCORE. A non-zero entry also marks the effect as
# inherently pathogenic-implying.

NON_PATHOGENIC_SCORE: float = 0.0
DEFAULT_MISSENSE_SCORE: float = 0.6

VARIANT_EFFECT_DEFAULT_SCORES: dict[str, float] = {
    # Loss of function
    "TRANSCRIPT_ABLATION": 1.0,
    "EXON_LOSS_VARIANT": 1.0,
    "STOP_GAINED": 1.0,
    "FRAMESHIFT_ELONGATION": 0.95,
    "FRAMESHIFT_TRUNCATION": 0.95,
    "FRAMESHIFT_VARIANT": 0.95,
    "START_LOST": 0.95,
    "SPLICE_ACCEPTOR_VARIANT": 0.9,
    "SPLICE_DONOR_VARIANT": 0.9,

    # Protein altering, length changing
    "INTERNAL_FEATURE_ELONGATION": 0.85,
    "FEATURE_TRUNCATION": 0.85,
    "MNV": 0.85,
    "INFRAME_INSERTION": 0.85,
    "DISRUPTIVE_INFRAME_INSERTION": 0.85,
    "INFRAME_DELETION": 0.85,
    "DISRUPTIVE_INFRAME_DELETION": 0.85,

    "SPLICE_REGION_VARIANT": 0.8,
    "STOP_LOST": 0.7,
    "MISSENSE_VARIANT": DEFAULT_MISSENSE_SCORE,
}


# =============================================================================
# PREDICTORS
# =============================================================================
# Raw-score thresholds beyond which a predictor calls a variant damaging.
# CADD is expressed on the PHRED scale.

PREDICTOR_THRESHOLDS: dict[str, float] = {
    "SIFT": 0.06,
    "POLYPHEN": 0.446,
    "MUTATION_TASTER": 0.94,
    "CADD": 20.0,
    "REMM": 0.5,
    "REVEL": 0.5,
    "MVP": 0.7,
    "ALPHA_MISSENSE": 0.564,
    "SPLICE_AI": 0.5,
}

# Raw scales where a lower value is more damaging; normalised as 1 - raw
LOWER_IS_WORSE_PREDICTORS: frozenset[str] = frozenset({"SIFT"})

# Raw scales given as PHRED; normalised as 1 - 10^(-raw/10)
PHRED_SCALED_PREDICTORS: frozenset[str] = frozenset({"CADD"})

# Predictors consulted for missense-like variants. Order is the tie-break
# when two predictors normalise to the same score: earlier wins.
MISSENSE_PREDICTOR_PRIORITY: tuple[str, ...] = (
    "MUTATION_TASTER",
    "SIFT",
    "POLYPHEN",
    "REVEL",
    "MVP",
    "ALPHA_MISSENSE",
    "CADD",
)

# General-purpose predictors consulted for every other effect
NON_MISSENSE_PREDICTORS: tuple[str, ...] = (
    "CADD",
    "REMM",
    "SPLICE_AI",
)

MISSENSE_LIKE_EFFECTS: frozenset[str] = frozenset({"MISSENSE_VARIANT"})

# Predictor output is ignored for these effects and the default score is used
PREDICTOR_EXCLUDED_EFFECTS: frozenset[str] = frozenset({"SYNONYMOUS_VARIANT"})


# =============================================================================
# FREQUENCY
# =============================================================================
# Frequencies are percentages. At or above the cutoff a variant is considered
# common and scores 0. Below it the score is 1 - coefficient * e^max_freq.

FREQUENCY_COMMON_CUTOFF: float = 2.0
FREQUENCY_CURVE_COEFFICIENT: float = 0.13533


# =============================================================================
# VARIANT DEFAULTS
# =============================================================================

DEFAULT_GENE_SYMBOL = "."
DEFAULT_SAMPLE_NAME = "sample"
