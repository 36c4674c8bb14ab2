"""Genome assembly and chromosome naming."""

from enum import Enum


class GenomeAssembly(str, Enum):
    """Reference genome build a variant is called against."""

    HG19 = "hg19"
    HG38 = "hg38"

    @classmethod
    def from_value(cls, value: str) -> "GenomeAssembly":
        """Resolve an assembly from its name or GRC alias (case-insensitive).

        Raises:
            ValueError: If the value is not a recognised assembly.
        """
        key = value.strip().lower()
        for assembly, aliases in _ASSEMBLY_ALIASES.items():
            if key in aliases:
                return assembly
        raise ValueError(
            f"Genome assembly '{value}' not recognised. Supported assemblies are hg19/GRCh37 and hg38/GRCh38"
        )

    def __str__(self) -> str:
        return self.value


_ASSEMBLY_ALIASES: dict[GenomeAssembly, set[str]] = {
    GenomeAssembly.HG19: {"hg19", "grch37"},
    GenomeAssembly.HG38: {"hg38", "grch38"},
}

# Integer encodings of the non-autosomal chromosomes
_CHROMOSOME_NAMES: dict[int, str] = {
    23: "X",
    24: "Y",
    25: "MT",
}


def chromosome_name(chromosome: int) -> str:
    """Display name for an integer chromosome (23=X, 24=Y, 25=MT)."""
    return _CHROMOSOME_NAMES.get(chromosome, str(chromosome))
