"""Variant whitelist.

A whitelist is an externally curated set of alleles that are always treated
as maximally significant. Membership is by allele identity (assembly,
chromosome, position, ref, alt).
"""

from collections.abc import Iterable
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from varprio.config.debug import get_logger
from varprio.models.genome import GenomeAssembly
from varprio.models.variant_evaluation import VariantEvaluation

logger = get_logger(__name__)


class AlleleKey(BaseModel):
    """Hashable identity of an allele."""

    model_config = ConfigDict(frozen=True)

    genome_assembly: GenomeAssembly
    chromosome: int
    position: int
    ref: str
    alt: str

    @classmethod
    def of(cls, variant: VariantEvaluation) -> "AlleleKey":
        return cls(
            genome_assembly=variant.genome_assembly,
            chromosome=variant.chromosome,
            position=variant.position,
            ref=variant.ref,
            alt=variant.alt,
        )


class VariantWhiteList(Protocol):
    def contains(self, variant: VariantEvaluation) -> bool: ...


class InMemoryVariantWhiteList:
    """Whitelist held as a set of allele keys."""

    def __init__(self, keys: Iterable[AlleleKey]):
        self._keys = frozenset(keys)

    @classmethod
    def of(cls, keys: Iterable[AlleleKey]) -> "InMemoryVariantWhiteList":
        return cls(keys)

    @classmethod
    def empty(cls) -> "InMemoryVariantWhiteList":
        return cls(())

    def contains(self, variant: VariantEvaluation) -> bool:
        return AlleleKey.of(variant) in self._keys

    def __len__(self) -> int:
        return len(self._keys)


def apply_whitelist(variants: Iterable[VariantEvaluation], whitelist: VariantWhiteList) -> int:
    """Mark every whitelisted variant; returns how many were marked."""
    marked = 0
    for variant in variants:
        if whitelist.contains(variant):
            variant.set_whitelisted(True)
            marked += 1
            logger.debug("Whitelisted %s-%s-%s-%s", variant.chromosome_name, variant.position, variant.ref, variant.alt)
    return marked
