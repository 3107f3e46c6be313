"""seqfreq package."""

from .alphabet import Alphabet, get_states, infer_alphabet
from .errors import (
    AlphabetMismatchError,
    FastaParseError,
    SeqFreqError,
    UnalignedCollectionError,
    UnsupportedAlphabetError,
)
from .frequencies import FrequencyProfile, pooled_frequencies, sequence_frequencies
from .io import parse_fasta, parse_fasta_text, read_fasta, write_fasta
from .model import Sequence, SequenceCollection

__all__ = [
    "Alphabet",
    "AlphabetMismatchError",
    "FastaParseError",
    "FrequencyProfile",
    "SeqFreqError",
    "Sequence",
    "SequenceCollection",
    "UnalignedCollectionError",
    "UnsupportedAlphabetError",
    "get_states",
    "infer_alphabet",
    "parse_fasta",
    "parse_fasta_text",
    "pooled_frequencies",
    "read_fasta",
    "sequence_frequencies",
    "write_fasta",
]

__version__ = "0.1.0"
