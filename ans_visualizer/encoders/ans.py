"""
Asymmetric Numeral Systems (ANS) state transitions.

ANS represents a whole message as one integer state. With symbol
frequencies f_s summing to L, and C_s the sum of the frequencies of the
symbols before s:

    symbol(n)   = pattern[n mod L]
    encode step = (n // f_s) * L + C_s + (n mod f_s)
    decode step = (n // L) * f_s + (n mod L) - C_s      where s = symbol(n)

The base pattern lays out f_s consecutive slots per symbol in alphabet
order, so every block of L states repeats the same assignment.

Everything here is a pure function of the alphabet; no bitstream is produced
and states are never renormalized. See: https://arxiv.org/abs/0902.0271
"""
import logging
from functools import lru_cache
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple, Union

import numpy as np

from ..config import DEFAULT_COLORS, DEFAULT_MAX_STATES, MAX_CHAIN_STEPS
from ..models.base import ForwardEdge, StateInfo, Symbol, color_for_index, validate_alphabet

logger = logging.getLogger(__name__)

SymbolRef = Union[Symbol, str]


class TransitionTables(NamedTuple):
    """Lookup tables derived from one alphabet."""
    symbols: Tuple[Symbol, ...]
    frequencies: np.ndarray   # f_s per symbol position
    offsets: np.ndarray       # C_s per symbol position
    pattern: np.ndarray       # slot -> symbol position, length L
    positions: Dict[str, int]
    total: int                # L


# ============================================================================
# Tables
# ============================================================================

def build_tables(alphabet: Sequence[Symbol]) -> TransitionTables:
    """
    Build (or fetch from cache) the transition tables for an alphabet.

    Raises:
        ValueError: if the alphabet breaks its invariants
    """
    symbols = tuple(alphabet)
    # Cache keys compare by value (True == 1, 3.0 == 3), so check first
    validate_alphabet(symbols)
    return _build_tables(symbols)


@lru_cache(maxsize=128)
def _build_tables(symbols: Tuple[Symbol, ...]) -> TransitionTables:
    frequencies = np.array([s.frequency for s in symbols], dtype=np.int64)
    offsets = np.zeros(len(symbols), dtype=np.int64)
    offsets[1:] = np.cumsum(frequencies)[:-1]
    pattern = np.repeat(np.arange(len(symbols), dtype=np.int64), frequencies)
    total = int(frequencies.sum())

    if len(pattern) != total:
        raise RuntimeError("Symbol map construction error")

    # Shared through the cache
    for arr in (frequencies, offsets, pattern):
        arr.flags.writeable = False

    logger.debug("Built transition tables: %d symbols, L=%d", len(symbols), total)
    return TransitionTables(
        symbols=symbols,
        frequencies=frequencies,
        offsets=offsets,
        pattern=pattern,
        positions={s.name: i for i, s in enumerate(symbols)},
        total=total,
    )


def cumulative_offsets(alphabet: Sequence[Symbol]) -> Dict[str, int]:
    """Return C_s for every symbol name."""
    tables = build_tables(alphabet)
    return {s.name: int(c) for s, c in zip(tables.symbols, tables.offsets)}


def _slot_owner(tables: TransitionTables, state: int) -> int:
    """Symbol position owning the slot of `state`."""
    slot = state % tables.total
    if not 0 <= slot < len(tables.pattern):
        raise RuntimeError(
            f"Invalid state encountered in edge chain calculation: {state}"
        )
    return int(tables.pattern[slot])


def _symbol_position(tables: TransitionTables, symbol: SymbolRef) -> int:
    name = symbol.name if isinstance(symbol, Symbol) else symbol
    try:
        return tables.positions[name]
    except KeyError:
        raise KeyError(f"Symbol {name!r} is not in the alphabet") from None


def _encode_step(tables: TransitionTables, state: int, position: int) -> int:
    f_s = int(tables.frequencies[position])
    c_s = int(tables.offsets[position])
    return (state // f_s) * tables.total + c_s + state % f_s


def _decode_step(tables: TransitionTables, state: int) -> Tuple[int, int]:
    position = _slot_owner(tables, state)
    f_s = int(tables.frequencies[position])
    c_s = int(tables.offsets[position])
    prev = (state // tables.total) * f_s + state % tables.total - c_s
    return prev, position


def _require_state(tables: TransitionTables, state: int) -> None:
    if tables.total == 0:
        raise ValueError("Alphabet is empty")
    if state < 0:
        raise ValueError(f"State must be non-negative, got {state}")


# ============================================================================
# State pattern
# ============================================================================

def calculate_l(alphabet: Sequence[Symbol]) -> int:
    """Calculate L (sum of all frequencies)."""
    return build_tables(alphabet).total


def state_symbol_indices(alphabet: Sequence[Symbol], max_states: int = DEFAULT_MAX_STATES) -> np.ndarray:
    """
    Symbol position of each state in [0, max_states), as an int64 array.
    """
    tables = build_tables(alphabet)
    if tables.total == 0 or max_states <= 0:
        return np.zeros(0, dtype=np.int64)
    return tables.pattern[np.arange(max_states, dtype=np.int64) % tables.total]


def generate_state_pattern(alphabet: Sequence[Symbol], max_states: int = DEFAULT_MAX_STATES) -> List[StateInfo]:
    """
    Generate the repeating pattern of symbols based on their frequencies.

    For example A:2, B:1, C:1 produces A, A, B, C, A, A, B, C, ...

    Args:
        alphabet: Ordered symbols; order fixes each symbol's slots
        max_states: Size of the preview window

    Returns:
        One StateInfo per state in [0, max_states)
    """
    symbols = build_tables(alphabet).symbols
    indices = state_symbol_indices(alphabet, max_states)
    return [StateInfo(i, symbols[k]) for i, k in enumerate(indices.tolist())]


def symbol_at(state: int, alphabet: Sequence[Symbol]) -> Symbol:
    """Symbol assigned to a state."""
    tables = build_tables(alphabet)
    _require_state(tables, state)
    return tables.symbols[_slot_owner(tables, state)]


# ============================================================================
# Transitions
# ============================================================================

def forward_state(state: int, symbol: SymbolRef, alphabet: Sequence[Symbol]) -> int:
    """
    Encode one symbol: the state reached from `state` by emitting `symbol`.

    Args:
        state: Source state (>= 0)
        symbol: A Symbol of the alphabet or its name

    Raises:
        KeyError: if the symbol is not in the alphabet
    """
    tables = build_tables(alphabet)
    _require_state(tables, state)
    return _encode_step(tables, state, _symbol_position(tables, symbol))


def backward_state(state: int, alphabet: Sequence[Symbol]) -> Tuple[int, Symbol]:
    """
    Decode one symbol: the previous state and the symbol of `state`.
    """
    tables = build_tables(alphabet)
    _require_state(tables, state)
    prev, position = _decode_step(tables, state)
    return prev, tables.symbols[position]


def calculate_edge_chain(state: int, alphabet: Sequence[Symbol], num_leading_repeats: int = 0) -> List[int]:
    """
    Calculate the chain of previous states from `state` back to a root.

    The walk appends each state and steps to its predecessor until it
    reaches a root, i.e. a state below the frequency of the first symbol.
    The root itself is only appended `num_leading_repeats` times, which
    displays that many leading first symbols.

    Returns:
        States from `state` down to the root; empty for an empty alphabet
        or a negative state

    Raises:
        RuntimeError: if a decode step fails to shrink the state
    """
    tables = build_tables(alphabet)
    if tables.total == 0 or state < 0:
        return []

    first_frequency = int(tables.frequencies[0])
    chain: List[int] = []
    current = state

    for _ in range(MAX_CHAIN_STEPS):
        if current < first_frequency:
            break
        prev, _ = _decode_step(tables, current)
        if prev == current:
            # Fixed point; only reachable with a single-symbol alphabet
            break
        if not 0 <= prev < current:
            raise RuntimeError(
                f"Decode step from state {current} went to {prev}; "
                f"expected a smaller non-negative state"
            )
        chain.append(current)
        current = prev
    else:
        raise RuntimeError(
            f"Edge chain from state {state} did not reach a root "
            f"within {MAX_CHAIN_STEPS} steps"
        )

    chain.extend([current] * num_leading_repeats)
    logger.debug("Edge chain for state %d: %d states, root %d", state, len(chain), current)
    return chain


def calculate_forward_edges(state: int, alphabet: Sequence[Symbol], max_states: int = DEFAULT_MAX_STATES) -> List[ForwardEdge]:
    """
    Calculate the forward edges from `state` for each symbol.

    Edges landing outside [0, max_states) are left out; the window is a
    display limit only.
    """
    tables = build_tables(alphabet)
    if tables.total == 0 or state < 0:
        return []

    edges = []
    for position, symbol in enumerate(tables.symbols):
        next_state = _encode_step(tables, state, position)
        if 0 <= next_state < max_states:
            edges.append(ForwardEdge(next_state, symbol))
    return edges


# ============================================================================
# Messages
# ============================================================================

def encode_message(message: Iterable[SymbolRef], alphabet: Sequence[Symbol], initial_state: int = 0) -> List[int]:
    """
    Encode a message one symbol at a time.

    Args:
        message: Symbols or symbol names; a string is read per character
        initial_state: State before the first symbol

    Returns:
        Visited states, starting with `initial_state`; the last one
        encodes the whole message
    """
    tables = build_tables(alphabet)
    _require_state(tables, initial_state)

    states = [initial_state]
    current = initial_state
    for symbol in message:
        current = _encode_step(tables, current, _symbol_position(tables, symbol))
        states.append(current)
    return states


def encoded_sequence(state: int, alphabet: Sequence[Symbol], num_leading_repeats: int = 0) -> List[Symbol]:
    """
    The message whose encoding ends in `state`, first symbol first.

    This reads the edge chain from the root upwards, so leading first
    symbols only appear when `num_leading_repeats` asks for them.
    """
    chain = calculate_edge_chain(state, alphabet, num_leading_repeats)
    if not chain:
        return []
    tables = build_tables(alphabet)
    return [tables.symbols[_slot_owner(tables, s)] for s in reversed(chain)]


# ============================================================================
# Palette
# ============================================================================

def get_default_colors() -> List[str]:
    """Get the default color palette."""
    return list(DEFAULT_COLORS)
