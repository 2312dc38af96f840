"""
Value types shared by the engine and its callers.
"""
import numbers
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from ..config import DEFAULT_COLORS


@dataclass(frozen=True)
class Symbol:
    """
    One symbol of an alphabet.

    The engine reads `name` and `frequency`; `color` is only carried
    through to renderers.
    """
    name: str
    frequency: int
    color: str = ""


class StateInfo(NamedTuple):
    """A state in the preview window and the symbol it is assigned."""
    index: int
    symbol: Symbol


class ForwardEdge(NamedTuple):
    """The state reached from a source state by encoding `symbol`."""
    to_state: int
    symbol: Symbol


def validate_alphabet(alphabet: Sequence[Symbol]) -> None:
    """
    Check the alphabet invariants the transition formulas rely on.

    Raises:
        ValueError: if a frequency is not a positive integer or a name
            appears twice.
    """
    seen = set()
    for symbol in alphabet:
        # bool is an int subclass but never a meaningful frequency
        if isinstance(symbol.frequency, bool) or not isinstance(symbol.frequency, numbers.Integral):
            raise ValueError(
                f"Frequency of symbol {symbol.name!r} must be an integer, "
                f"got {symbol.frequency!r}"
            )
        if symbol.frequency < 1:
            raise ValueError(
                f"Frequency of symbol {symbol.name!r} must be >= 1, "
                f"got {symbol.frequency}"
            )
        if symbol.name in seen:
            raise ValueError(f"Duplicate symbol name: {symbol.name!r}")
        seen.add(symbol.name)


def color_for_index(index: int) -> str:
    """Palette color for the symbol at `index`, cycling past the end."""
    return DEFAULT_COLORS[index % len(DEFAULT_COLORS)]
