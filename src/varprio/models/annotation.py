"""Transcript-level annotation supplied by the annotation stage."""

from pydantic import BaseModel, ConfigDict, Field

from varprio.models.effects import VariantEffect


class TranscriptAnnotation(BaseModel):
    """Consequence of a variant on a single transcript."""

    model_config = ConfigDict(frozen=True)

    gene_symbol: str = Field(default="", description="Gene symbol of the transcript")
    accession: str = Field(default="", description="Transcript accession (e.g., ENST00000269305)")
    variant_effect: VariantEffect = Field(
        default=VariantEffect.SEQUENCE_VARIANT, description="Most severe effect on this transcript"
    )
    hgvs_genomic: str = Field(default="", description="HGVS genomic notation")
    hgvs_cdna: str = Field(default="", description="HGVS cDNA notation")
    hgvs_protein: str = Field(default="", description="HGVS protein notation")
    distance_from_nearest_gene: int = Field(
        default=0, description="Distance to the nearest gene for intergenic variants"
    )
