"""
Alphabet editing.

These mirror the controls of the frequency form: the alphabet starts as
A:3, B:2, C:1, symbols are added as the first unused capital letter with
frequency 1, and frequencies never drop below 1. Every helper returns a new tuple.
"""
import re
import string
from typing import Sequence, Tuple, Union

from ..config import DEFAULT_ALPHABET, MAX_SYMBOLS
from .base import Symbol, color_for_index, validate_alphabet

Alphabet = Tuple[Symbol, ...]

# Leading integer of form input, as in "3x" or "2.5"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def default_alphabet() -> Alphabet:
    """A:3, B:2, C:1 (L = 6)."""
    return parse_alphabet(DEFAULT_ALPHABET)


def add_symbol(alphabet: Sequence[Symbol]) -> Alphabet:
    """
    Append the first unused capital letter with frequency 1.

    Raises:
        ValueError: if the alphabet already has MAX_SYMBOLS symbols
    """
    n = len(alphabet)
    if n >= MAX_SYMBOLS:
        raise ValueError(f"Alphabet is limited to {MAX_SYMBOLS} symbols")
    used = {s.name for s in alphabet}
    name = next(c for c in string.ascii_uppercase if c not in used)
    return tuple(alphabet) + (Symbol(name, 1, color_for_index(n)),)


def remove_symbol(alphabet: Sequence[Symbol], index: int) -> Alphabet:
    """
    Drop the symbol at `index`; the last remaining symbol cannot be removed.
    """
    if not -len(alphabet) <= index < len(alphabet):
        raise IndexError(f"No symbol at index {index}")
    if len(alphabet) <= 1:
        raise ValueError("Alphabet must keep at least one symbol")
    index %= len(alphabet)
    return tuple(s for i, s in enumerate(alphabet) if i != index)


def set_frequency(alphabet: Sequence[Symbol], index: int, value: Union[int, str]) -> Alphabet:
    """
    Replace the frequency of the symbol at `index`.

    `value` is parsed like form input: the leading integer is used ("3x"
    gives 3, "2.5" gives 2), no integer or zero gives 1, and negatives are
    clamped to 1.
    """
    symbols = list(alphabet)
    match = _LEADING_INT.match(str(value))
    frequency = int(match.group(1)) if match else 1
    old = symbols[index]
    symbols[index] = Symbol(old.name, max(1, frequency), old.color)
    return tuple(symbols)


def parse_alphabet(text: str) -> Alphabet:
    """
    Parse "A:3,B:2,C:1" into an alphabet with palette colors.

    Raises:
        ValueError: on malformed entries, bad frequencies or repeated names
    """
    symbols = []
    for entry in (part.strip() for part in text.split(",")):
        if not entry:
            continue
        name, sep, freq = entry.rpartition(":")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected NAME:FREQUENCY, got {entry!r}")
        try:
            frequency = int(freq)
        except ValueError:
            raise ValueError(f"Frequency of {name!r} is not an integer: {freq!r}") from None
        symbols.append(Symbol(name, frequency, color_for_index(len(symbols))))

    if len(symbols) > MAX_SYMBOLS:
        raise ValueError(f"Alphabet is limited to {MAX_SYMBOLS} symbols")
    validate_alphabet(symbols)
    return tuple(symbols)


def format_alphabet(alphabet: Sequence[Symbol]) -> str:
    """Inverse of parse_alphabet (colors are not kept)."""
    return ",".join(f"{s.name}:{s.frequency}" for s in alphabet)
