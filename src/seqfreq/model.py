from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import numpy as np

from .alphabet import Alphabet, get_states, infer_alphabet
from .errors import AlphabetMismatchError, UnalignedCollectionError
from .frequencies import gc_content, pooled_frequencies, sequence_frequencies


def _frozen_mapping(values: Mapping[str, object]) -> Mapping:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class Sequence:
    name: str
    residues: str
    alphabet: Alphabet
    counts: Mapping[str, int] = field(compare=False)
    frequencies: Mapping[str, float] = field(hash=False)
    gc_content: float | None = None
    warnings: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet", Alphabet(self.alphabet))
        object.__setattr__(self, "counts", _frozen_mapping(self.counts))
        object.__setattr__(self, "frequencies", _frozen_mapping(self.frequencies))

    @classmethod
    def from_residues(
        cls, name: str, residues: str, alphabet: Alphabet | None = None
    ) -> "Sequence":
        """Classify, count and normalise in one step.

        ``alphabet`` overrides inference; requesting ``Alphabet.MULTI_STATE``
        raises ``UnsupportedAlphabetError``.
        """
        kind = infer_alphabet(residues) if alphabet is None else Alphabet(alphabet)
        profile = sequence_frequencies(residues, kind, label=f"Sequence '{name}'")
        gc = gc_content(profile.frequencies) if kind is Alphabet.NUCLEOTIDE else None
        return cls(
            name=name,
            residues=residues,
            alphabet=kind,
            counts=profile.counts,
            frequencies=profile.frequencies,
            gc_content=gc,
            warnings=profile.warnings,
        )

    def __len__(self) -> int:
        return len(self.residues)

    @property
    def states(self) -> tuple[str, ...]:
        return get_states(self.alphabet)

    @property
    def frequency_vector(self) -> np.ndarray:
        return np.array(list(self.frequencies.values()), dtype=float)

    def to_fasta(self) -> str:
        return ">" + self.name + "\n" + self.residues

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "length": len(self.residues),
            "alphabet": self.alphabet.value,
            "counts": dict(self.counts),
            "frequencies": dict(self.frequencies),
            "gc_content": self.gc_content,
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class SequenceCollection:
    sequences: tuple[Sequence, ...]
    alphabet: Alphabet | None
    is_aligned: bool
    alignment_length: int | None
    counts: Mapping[str, int] = field(compare=False)
    frequencies: Mapping[str, float] = field(hash=False)
    warnings: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.alphabet is not None:
            object.__setattr__(self, "alphabet", Alphabet(self.alphabet))
        object.__setattr__(self, "sequences", tuple(self.sequences))
        object.__setattr__(self, "counts", _frozen_mapping(self.counts))
        object.__setattr__(self, "frequencies", _frozen_mapping(self.frequencies))

    @classmethod
    def from_sequences(cls, sequences: Iterable[Sequence]) -> "SequenceCollection":
        """Validate a shared alphabet, detect alignment and pool frequencies.

        An empty input gives an empty, unaligned collection with no alphabet.
        """
        members = tuple(sequences)
        if not members:
            return cls(
                sequences=(),
                alphabet=None,
                is_aligned=False,
                alignment_length=None,
                counts={},
                frequencies={},
            )

        alphabet = members[0].alphabet
        for seq in members:
            if seq.alphabet != alphabet:
                raise AlphabetMismatchError(seq.name, seq.alphabet.value, alphabet.value)

        lengths = {len(seq) for seq in members}
        aligned = len(lengths) == 1
        pooled = pooled_frequencies(
            (seq.counts for seq in members), alphabet, label="Collection"
        )
        return cls(
            sequences=members,
            alphabet=alphabet,
            is_aligned=aligned,
            alignment_length=len(members[0]) if aligned else None,
            counts=pooled.counts,
            frequencies=pooled.frequencies,
            warnings=pooled.warnings,
        )

    def __len__(self) -> int:
        return len(self.sequences)

    def __iter__(self) -> Iterator[Sequence]:
        return iter(self.sequences)

    def __getitem__(self, index: int) -> Sequence:
        return self.sequences[index]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(seq.name for seq in self.sequences)

    @property
    def frequency_vector(self) -> np.ndarray:
        return np.array(list(self.frequencies.values()), dtype=float)

    def _require_aligned(self) -> int:
        if not self.is_aligned or self.alignment_length is None:
            raise UnalignedCollectionError(
                "Cannot return columns, sequences are not aligned."
            )
        return self.alignment_length

    def column(self, index: int) -> str:
        length = self._require_aligned()
        if not 0 <= index < length:
            raise IndexError(f"Column {index} out of range for alignment length {length}.")
        return "".join(seq.residues[index] for seq in self.sequences)

    def iter_columns(self) -> Iterator[str]:
        length = self._require_aligned()
        return (self.column(i) for i in range(length))

    def columns(self) -> dict[int, str]:
        """Map each 0-based position to its residues in insertion order."""
        return dict(enumerate(self.iter_columns()))

    def to_fasta(self) -> str:
        return "".join(seq.to_fasta() + "\n" for seq in self.sequences)

    def to_dict(self) -> dict[str, object]:
        return {
            "n_sequences": len(self.sequences),
            "alphabet": None if self.alphabet is None else self.alphabet.value,
            "is_aligned": self.is_aligned,
            "alignment_length": self.alignment_length,
            "counts": dict(self.counts),
            "frequencies": dict(self.frequencies),
            "warnings": list(self.warnings),
            "sequences": [seq.to_dict() for seq in self.sequences],
        }
