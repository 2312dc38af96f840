"""
Symbols, alphabets and symbol statistics.
"""
from .base import ForwardEdge, StateInfo, Symbol, color_for_index, validate_alphabet
from .alphabet import (
    add_symbol,
    default_alphabet,
    format_alphabet,
    parse_alphabet,
    remove_symbol,
    set_frequency,
)
from .statistical import alphabet_from_message, count_symbols, entropy, probabilities, symbol_costs

__all__ = [
    "ForwardEdge",
    "StateInfo",
    "Symbol",
    "color_for_index",
    "validate_alphabet",
    "add_symbol",
    "default_alphabet",
    "format_alphabet",
    "parse_alphabet",
    "remove_symbol",
    "set_frequency",
    "alphabet_from_message",
    "count_symbols",
    "entropy",
    "probabilities",
    "symbol_costs",
]
