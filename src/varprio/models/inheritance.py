"""Mendelian modes of inheritance."""

from enum import Enum


class ModeOfInheritance(str, Enum):
    """Inheritance pattern under which filter and gene-score outcomes are tracked.

    ANY is the default bucket for results that apply regardless of mode.
    """

    ANY = "ANY"
    AUTOSOMAL_DOMINANT = "AUTOSOMAL_DOMINANT"
    AUTOSOMAL_RECESSIVE = "AUTOSOMAL_RECESSIVE"
    X_DOMINANT = "X_DOMINANT"
    X_RECESSIVE = "X_RECESSIVE"
    MITOCHONDRIAL = "MITOCHONDRIAL"

    @classmethod
    def specific_modes(cls) -> tuple["ModeOfInheritance", ...]:
        """All modes except ANY."""
        return tuple(mode for mode in cls if mode is not cls.ANY)
