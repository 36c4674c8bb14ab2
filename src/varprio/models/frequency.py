"""Population frequency data for a variant.

Frequencies are percentages as reported by each population database. The
frequency score maps the highest observed frequency onto 0-1 where rare (or
unobserved) variants score 1 and common variants score 0.
"""

import math
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from varprio.config.constants import FREQUENCY_COMMON_CUTOFF, FREQUENCY_CURVE_COEFFICIENT


class FrequencySource(str, Enum):
    """Population database an allele frequency was observed in."""

    LOCAL = "LOCAL"
    THOUSAND_GENOMES = "THOUSAND_GENOMES"
    TOPMED = "TOPMED"
    UK10K = "UK10K"

    ESP_AFRICAN_AMERICAN = "ESP_AFRICAN_AMERICAN"
    ESP_EUROPEAN_AMERICAN = "ESP_EUROPEAN_AMERICAN"
    ESP_ALL = "ESP_ALL"

    EXAC_AFRICAN_INC_AFRICAN_AMERICAN = "EXAC_AFRICAN_INC_AFRICAN_AMERICAN"
    EXAC_AMERICAN = "EXAC_AMERICAN"
    EXAC_EAST_ASIAN = "EXAC_EAST_ASIAN"
    EXAC_FINNISH = "EXAC_FINNISH"
    EXAC_NON_FINNISH_EUROPEAN = "EXAC_NON_FINNISH_EUROPEAN"
    EXAC_OTHER = "EXAC_OTHER"
    EXAC_SOUTH_ASIAN = "EXAC_SOUTH_ASIAN"

    GNOMAD_E_AFR = "GNOMAD_E_AFR"
    GNOMAD_E_AMR = "GNOMAD_E_AMR"
    GNOMAD_E_ASJ = "GNOMAD_E_ASJ"
    GNOMAD_E_EAS = "GNOMAD_E_EAS"
    GNOMAD_E_FIN = "GNOMAD_E_FIN"
    GNOMAD_E_NFE = "GNOMAD_E_NFE"
    GNOMAD_E_OTH = "GNOMAD_E_OTH"
    GNOMAD_E_SAS = "GNOMAD_E_SAS"

    GNOMAD_G_AFR = "GNOMAD_G_AFR"
    GNOMAD_G_AMR = "GNOMAD_G_AMR"
    GNOMAD_G_ASJ = "GNOMAD_G_ASJ"
    GNOMAD_G_EAS = "GNOMAD_G_EAS"
    GNOMAD_G_FIN = "GNOMAD_G_FIN"
    GNOMAD_G_NFE = "GNOMAD_G_NFE"
    GNOMAD_G_OTH = "GNOMAD_G_OTH"
    GNOMAD_G_SAS = "GNOMAD_G_SAS"


class Frequency(BaseModel):
    """Allele frequency (percentage) observed in one population source."""

    model_config = ConfigDict(frozen=True)

    source: FrequencySource
    frequency: float = Field(..., ge=0.0, description="Allele frequency as a percentage")

    @classmethod
    def of(cls, source: FrequencySource, frequency: float) -> "Frequency":
        return cls(source=source, frequency=frequency)


class RsId(BaseModel):
    """dbSNP reference SNP identifier; ``id=None`` means unknown."""

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(default=None, ge=0, description="Numeric part of the rsID")

    @classmethod
    def of(cls, rs_id: int) -> "RsId":
        return cls(id=rs_id)

    @classmethod
    def empty(cls) -> "RsId":
        return cls()

    def is_empty(self) -> bool:
        return self.id is None

    def __str__(self) -> str:
        return "." if self.id is None else f"rs{self.id}"


class FrequencyData(BaseModel):
    """Optional rsID plus at most one frequency per population source."""

    model_config = ConfigDict(frozen=True)

    rs_id: RsId = Field(default_factory=RsId.empty, description="dbSNP identifier, if known")
    frequencies: dict[FrequencySource, Frequency] = Field(
        default_factory=dict, description="Frequency keyed by its source"
    )

    @field_validator("frequencies")
    @classmethod
    def _keys_match_sources(cls, frequencies: dict[FrequencySource, Frequency]) -> dict[FrequencySource, Frequency]:
        for source, frequency in frequencies.items():
            if frequency.source != source:
                raise ValueError(f"Frequency from {frequency.source.value} stored under {source.value}")
        return frequencies

    @classmethod
    def of(cls, *frequencies: Frequency, rs_id: RsId | None = None) -> "FrequencyData":
        """Build from individual frequencies; a later value for a source replaces an earlier one."""
        by_source = {frequency.source: frequency for frequency in frequencies}
        return cls(rs_id=rs_id if rs_id is not None else RsId.empty(), frequencies=by_source)

    @classmethod
    def empty(cls) -> "FrequencyData":
        return cls()

    def __hash__(self) -> int:
        return hash((self.rs_id, tuple(self.known_frequencies)))

    def has_rs_id(self) -> bool:
        return not self.rs_id.is_empty()

    def has_known_frequency(self) -> bool:
        return bool(self.frequencies)

    def is_represented_in_database(self) -> bool:
        """Known to dbSNP or to any frequency source."""
        return self.has_rs_id() or self.has_known_frequency()

    def get_frequency_for_source(self, source: FrequencySource) -> Frequency | None:
        return self.frequencies.get(source)

    @property
    def known_frequencies(self) -> list[Frequency]:
        """Frequencies in source declaration order."""
        return [self.frequencies[source] for source in FrequencySource if source in self.frequencies]

    @property
    def max_freq(self) -> float:
        """Highest frequency across all sources, 0 when there are none."""
        return max((f.frequency for f in self.frequencies.values()), default=0.0)

    def max_freq_for_sources(self, sources: Iterable[FrequencySource]) -> float:
        """Highest frequency across the given sources only, 0 when none are present."""
        wanted = set(sources)
        return max(
            (f.frequency for source, f in self.frequencies.items() if source in wanted),
            default=0.0,
        )

    @computed_field
    @property
    def score(self) -> float:
        """Frequency score in [0, 1]; 1 for unobserved variants, 0 at or above the common cutoff."""
        max_freq = self.max_freq
        if max_freq <= 0.0:
            return 1.0
        if max_freq >= FREQUENCY_COMMON_CUTOFF:
            return 0.0
        return max(0.0, 1.0 - FREQUENCY_CURVE_COEFFICIENT * math.exp(max_freq))

    def score_for(self, whitelisted: bool = False) -> float:
        """Frequency score, or 1.0 for a whitelisted variant."""
        if whitelisted:
            return 1.0
        return self.score
