from __future__ import annotations

import pandas as pd

from .alphabet import get_states
from .model import SequenceCollection

BASE_COLUMNS = ["name", "length", "alphabet", "gc_content"]


def _frequency_column(state: str) -> str:
    return f"freq_{state}"


def sequence_table(collection: SequenceCollection) -> pd.DataFrame:
    """One row per sequence with its length, alphabet, GC content and frequencies."""
    states = () if collection.alphabet is None else get_states(collection.alphabet)
    columns = BASE_COLUMNS + [_frequency_column(s) for s in states]
    rows: list[dict[str, object]] = []
    for seq in collection:
        row: dict[str, object] = {
            "name": seq.name,
            "length": len(seq),
            "alphabet": seq.alphabet.value,
            "gc_content": seq.gc_content,
        }
        for state, value in seq.frequencies.items():
            row[_frequency_column(state)] = value
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def collection_summary(collection: SequenceCollection) -> dict[str, object]:
    payload = collection.to_dict()
    payload["names"] = list(collection.names)
    return payload


def _format_frequencies(frequencies: dict[str, float], precision: int) -> str:
    return "[" + " ".join(f"{value:.{precision}f}" for value in frequencies.values()) + "]"


def render_report(collection: SequenceCollection, *, precision: int = 4) -> str:
    alphabet = "NA" if collection.alphabet is None else collection.alphabet.value
    length = "NA" if collection.alignment_length is None else str(collection.alignment_length)
    lines = [
        f"sequences: {len(collection)}",
        f"alphabet: {alphabet}",
        f"aligned: {str(collection.is_aligned).lower()}",
        f"alignment_length: {length}",
        f"states: {' '.join(collection.frequencies)}",
        f"frequencies: {_format_frequencies(collection.frequencies, precision)}",
    ]
    for seq in collection:
        gc = "NA" if seq.gc_content is None else f"{seq.gc_content:.{precision}f}"
        lines.append(f"{seq.name}\tlength={len(seq)}\tgc={gc}")
    for warning in collection.warnings:
        lines.append(f"warning: {warning}")
    for seq in collection:
        for warning in seq.warnings:
            lines.append(f"warning: {warning}")
    return "\n".join(lines)
