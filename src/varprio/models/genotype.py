"""Per-sample genotype calls."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlleleCall(str, Enum):
    """A single allele call within a sample genotype.

    Declaration order is the sort order used for unphased genotypes, so
    ALT/OTHER_ALT (a 1/2 genotype) renders as "-/1".
    """

    OTHER_ALT = "-"
    NO_CALL = "."
    REF = "0"
    ALT = "1"


_CALL_ORDER = {call: index for index, call in enumerate(AlleleCall)}


class SampleGenotype(BaseModel):
    """Genotype of one sample at a variant site: zero, one or two allele calls.

    Unphased genotypes are stored in canonical (sorted) order so that
    ``SampleGenotype.of(ALT, REF) == SampleGenotype.of(REF, ALT)``.
    """

    model_config = ConfigDict(frozen=True)

    calls: tuple[AlleleCall, ...] = Field(default=(), description="Allele calls, at most two")
    phased: bool = Field(default=False, description="Calls are phased (rendered with '|')")

    @field_validator("calls")
    @classmethod
    def _at_most_two_calls(cls, calls: tuple[AlleleCall, ...]) -> tuple[AlleleCall, ...]:
        if len(calls) > 2:
            raise ValueError(f"A sample genotype holds at most two calls, got {len(calls)}")
        return calls

    @classmethod
    def of(cls, *calls: AlleleCall) -> "SampleGenotype":
        """Unphased genotype from the given calls."""
        return cls(calls=tuple(sorted(calls, key=_CALL_ORDER.__getitem__)))

    @classmethod
    def phased_of(cls, *calls: AlleleCall) -> "SampleGenotype":
        """Phased genotype; call order is kept."""
        return cls(calls=tuple(calls), phased=True)

    @classmethod
    def empty(cls) -> "SampleGenotype":
        return cls()

    @classmethod
    def no_call(cls) -> "SampleGenotype":
        return cls.of(AlleleCall.NO_CALL, AlleleCall.NO_CALL)

    @classmethod
    def hom_ref(cls) -> "SampleGenotype":
        return cls.of(AlleleCall.REF, AlleleCall.REF)

    @classmethod
    def het(cls) -> "SampleGenotype":
        return cls.of(AlleleCall.REF, AlleleCall.ALT)

    @classmethod
    def hom_alt(cls) -> "SampleGenotype":
        return cls.of(AlleleCall.ALT, AlleleCall.ALT)

    def is_empty(self) -> bool:
        return not self.calls

    def is_no_call(self) -> bool:
        return bool(self.calls) and all(call == AlleleCall.NO_CALL for call in self.calls)

    def is_hom_ref(self) -> bool:
        return bool(self.calls) and all(call == AlleleCall.REF for call in self.calls)

    def is_hom_alt(self) -> bool:
        return len(self.calls) == 2 and all(call == AlleleCall.ALT for call in self.calls)

    def is_het(self) -> bool:
        """One ALT call paired with a different, called allele."""
        return (
            len(self.calls) == 2
            and AlleleCall.ALT in self.calls
            and AlleleCall.NO_CALL not in self.calls
            and self.calls[0] != self.calls[1]
        )

    def __str__(self) -> str:
        if not self.calls:
            return "NA"
        separator = "|" if self.phased else "/"
        return separator.join(call.value for call in self.calls)
