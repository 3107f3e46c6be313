from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .errors import FastaParseError
from .model import Sequence, SequenceCollection

_LOGGER = logging.getLogger(__name__)


def _strip_terminator(raw: str) -> str:
    return raw.rstrip("\r\n")


def parse_fasta(lines: Iterable[str], *, source: str | None = None) -> SequenceCollection:
    """Build a collection from FASTA lines.

    Header names keep everything after ``>`` except trailing whitespace.
    Residue lines are concatenated verbatim; blank lines are skipped.
    Empty input gives an empty collection.
    """
    records: list[tuple[str, str]] = []
    name: str | None = None
    chunks: list[str] = []

    for line_no, raw in enumerate(lines, start=1):
        line = _strip_terminator(raw)
        if not line:
            continue
        if line.startswith(">"):
            if name is not None:
                records.append((name, "".join(chunks)))
                chunks = []
            name = line[1:].rstrip()
            continue
        if name is None:
            raise FastaParseError(
                "FASTA sequence without header", line_no=line_no, source=source
            )
        chunks.append(line)

    if name is not None:
        records.append((name, "".join(chunks)))

    _LOGGER.debug("Parsed %d FASTA records from %s", len(records), source or "<lines>")
    sequences = [Sequence.from_residues(n, residues) for n, residues in records]
    return SequenceCollection.from_sequences(sequences)


def parse_fasta_text(text: str, *, source: str | None = None) -> SequenceCollection:
    return parse_fasta(text.splitlines(), source=source)


def read_fasta(path: str | Path) -> SequenceCollection:
    """Read and analyse a FASTA file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")

    with path.open("r", encoding="utf-8", newline="") as handle:
        return parse_fasta(handle, source=str(path))


def write_fasta(collection: SequenceCollection, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(collection.to_fasta())
    return path
