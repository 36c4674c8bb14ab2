"""Orderings used to sort variants.

Natural ordering (chromosome, position, ref, alt, then assembly) gives a
deterministic default sort and is what ``sorted(variants)`` uses. Rank
ordering is used for reports: variants contributing to a gene score first,
then by descending variant score, then natural ordering. Both are total over
any collection, so results do not depend on input order.

Example:
    >>> ranked = sort_by_rank(variants)
    >>> same = sorted(variants, key=rank_sort_key)
"""

from collections.abc import Iterable

from varprio.models.variant_evaluation import VariantEvaluation


def natural_sort_key(variant: VariantEvaluation) -> tuple[int, int, str, str, str]:
    return variant.natural_key()


def rank_sort_key(variant: VariantEvaluation) -> tuple:
    return (
        not variant.contributes_to_gene_score(),
        -variant.variant_score,
        *variant.natural_key(),
    )


def _compare(left: tuple, right: tuple) -> int:
    return (left > right) - (left < right)


def compare_natural(left: VariantEvaluation, right: VariantEvaluation) -> int:
    """-1, 0 or 1; for use with functools.cmp_to_key."""
    return _compare(natural_sort_key(left), natural_sort_key(right))


def compare_by_rank(left: VariantEvaluation, right: VariantEvaluation) -> int:
    """-1 if left ranks above right, 1 if below, 0 if they tie."""
    return _compare(rank_sort_key(left), rank_sort_key(right))


def sort_by_rank(variants: Iterable[VariantEvaluation]) -> list[VariantEvaluation]:
    """New list of variants in report rank order."""
    return sorted(variants, key=rank_sort_key)
