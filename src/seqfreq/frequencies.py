from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

import numpy as np

from .alphabet import Alphabet, get_states
from .errors import UnsupportedAlphabetError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrequencyProfile:
    counts: dict[str, int]
    frequencies: dict[str, float]
    warnings: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return int(sum(self.counts.values()))

    @property
    def vector(self) -> np.ndarray:
        return np.array(list(self.frequencies.values()), dtype=float)


def _require_states(alphabet: Alphabet) -> tuple[str, ...]:
    states = get_states(alphabet)
    if not states:
        raise UnsupportedAlphabetError(
            f"Frequencies are not defined for the {Alphabet(alphabet).name.lower()} alphabet."
        )
    return states


def count_symbols(residues: str, alphabet: Alphabet) -> dict[str, int]:
    """Case-sensitive occurrence count of each canonical symbol, in canonical order."""
    states = _require_states(alphabet)
    return {state: residues.count(state) for state in states}


def normalize_counts(
    counts: Mapping[str, int], *, label: str = "sequence"
) -> tuple[dict[str, float], tuple[str, ...]]:
    """Divide counts by their total.

    A zero total yields an all-zero vector and a warning instead of NaN.
    """
    raw = np.array(list(counts.values()), dtype=float)
    total = float(raw.sum())
    if total <= 0:
        msg = f"{label} has no canonical residues; frequencies set to 0.0."
        _LOGGER.warning(msg)
        return {state: 0.0 for state in counts}, (msg,)
    props = raw / total
    return {state: float(p) for state, p in zip(counts, props)}, ()


def sequence_frequencies(
    residues: str, alphabet: Alphabet, *, label: str = "sequence"
) -> FrequencyProfile:
    counts = count_symbols(residues, alphabet)
    freqs, warnings = normalize_counts(counts, label=label)
    return FrequencyProfile(counts=counts, frequencies=freqs, warnings=warnings)


def pooled_frequencies(
    profiles: Iterable[Mapping[str, int]], alphabet: Alphabet, *, label: str = "collection"
) -> FrequencyProfile:
    """Pool raw per-sequence counts, then normalise once.

    Frequencies are pooled count / pooled total, not the mean of
    per-sequence frequencies.
    """
    states = _require_states(alphabet)
    pooled = np.zeros(len(states), dtype=np.int64)
    for counts in profiles:
        pooled += np.array([counts.get(state, 0) for state in states], dtype=np.int64)
    counts_out = {state: int(n) for state, n in zip(states, pooled)}
    freqs, warnings = normalize_counts(counts_out, label=label)
    return FrequencyProfile(counts=counts_out, frequencies=freqs, warnings=warnings)


def gc_content(frequencies: Mapping[str, float]) -> float:
    return float(frequencies["G"] + frequencies["C"])
