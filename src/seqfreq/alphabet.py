from __future__ import annotations

from enum import Enum


class Alphabet(str, Enum):
    NUCLEOTIDE = "nuc"
    AMINO_ACID = "aa"
    MULTI_STATE = "mult"


NUCLEOTIDE_STATES = ("A", "T", "G", "C")
AMINO_ACID_STATES = (
    "A",
    "R",
    "N",
    "D",
    "C",
    "Q",
    "E",
    "G",
    "H",
    "I",
    "L",
    "K",
    "M",
    "F",
    "P",
    "S",
    "T",
    "W",
    "Y",
    "V",
)

# N and gap are accepted as nucleotide but never counted.
NUCLEOTIDE_TOLERATED = frozenset(NUCLEOTIDE_STATES) | {"N", "-"}

_STATES = {
    Alphabet.NUCLEOTIDE: NUCLEOTIDE_STATES,
    Alphabet.AMINO_ACID: AMINO_ACID_STATES,
    Alphabet.MULTI_STATE: (),
}


def get_states(alphabet: Alphabet) -> tuple[str, ...]:
    """Canonical ordered symbols of an alphabet; empty for multi-state."""
    return _STATES[Alphabet(alphabet)]


def infer_alphabet(residues: str) -> Alphabet:
    """Classify residues as nucleotide unless a symbol outside A/T/G/C/N/- occurs.

    Symbol-set heuristic only: any foreign character (including lowercase
    letters and non-standard codes such as X) flips the whole sequence to
    amino acid. Multi-state is never inferred.
    """
    for symbol in residues:
        if symbol not in NUCLEOTIDE_TOLERATED:
            return Alphabet.AMINO_ACID
    return Alphabet.NUCLEOTIDE
