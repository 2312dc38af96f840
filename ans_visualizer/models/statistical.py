"""
Symbol statistics: alphabets estimated from sample messages, and the
information-theoretic cost of each symbol.
"""
from collections import Counter
from typing import Dict, Iterable, Sequence

import numpy as np

from ..config import MAX_SYMBOLS
from .base import Symbol, color_for_index


def count_symbols(message: Iterable[str]) -> Counter:
    """Count symbol names, keeping first-appearance order."""
    return Counter(message)


def alphabet_from_message(message: Iterable[str], sort_by_frequency: bool = False):
    """
    Build an alphabet whose frequencies are the observed counts.

    Args:
        message: Symbol names; a string is read per character
        sort_by_frequency: Put the most common symbol first instead of
            keeping first-appearance order

    Raises:
        ValueError: if the message is empty or uses too many symbols
    """
    counts = count_symbols(message)
    if not counts:
        raise ValueError("Cannot build an alphabet from an empty message")
    if len(counts) > MAX_SYMBOLS:
        raise ValueError(
            f"Message uses {len(counts)} distinct symbols; the limit is {MAX_SYMBOLS}"
        )

    items = counts.most_common() if sort_by_frequency else counts.items()
    return tuple(
        Symbol(name, count, color_for_index(i))
        for i, (name, count) in enumerate(items)
    )


def entropy(probs: np.ndarray) -> float:
    """Calculate entropy in bits."""
    probs = np.asarray(probs, dtype=np.float64)
    probs = probs[probs > 0]
    return float(-np.sum(probs * np.log2(probs)))


def probabilities(alphabet: Sequence[Symbol]) -> np.ndarray:
    """f_s / L for each symbol, in alphabet order."""
    frequencies = np.array([s.frequency for s in alphabet], dtype=np.float64)
    if frequencies.size == 0:
        return frequencies
    return frequencies / frequencies.sum()


def symbol_costs(alphabet: Sequence[Symbol]) -> Dict[str, float]:
    """
    Bits added per encoded symbol.

    Encoding s multiplies the state by about L / f_s, so log2(state)
    grows by log2(L / f_s).
    """
    probs = probabilities(alphabet)
    return {s.name: float(-np.log2(p)) for s, p in zip(alphabet, probs)}
