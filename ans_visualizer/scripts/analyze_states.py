#!/usr/bin/env python3
"""
Analyze the state table of an alphabet.

This script shows:
- L, the cumulative offsets and the base pattern
- The preview window as a grid, one period of L states per group
- How often each symbol occurs in the window (it should match f_s / L)
- Entropy and per-symbol cost in bits
- How long the decode chains in the window are

Usage:
    python -m ans_visualizer.scripts.analyze_states --alphabet A:3,B:2,C:1
"""
import argparse
from typing import List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from ..config import DEFAULT_ALPHABET, GRID_WIDTH
from ..encoders.ans import (
    calculate_edge_chain,
    calculate_l,
    cumulative_offsets,
    generate_state_pattern,
    state_symbol_indices,
)
from ..models.alphabet import format_alphabet, parse_alphabet
from ..models.base import Symbol
from ..models.statistical import entropy, probabilities, symbol_costs


def render_grid(alphabet: Sequence[Symbol], max_states: int, width: int = GRID_WIDTH) -> List[str]:
    """
    Lay the window out in rows holding a whole number of periods.

    Each line starts with the index of its first state; groups of L
    symbols are separated by a space.
    """
    indices = state_symbol_indices(alphabet, max_states)
    if indices.size == 0:
        return []

    names = [s.name for s in alphabet]
    cell = max(len(n) for n in names)
    L = calculate_l(alphabet)

    groups_per_row = max(1, (width + 1) // (L * cell + 1))
    per_row = groups_per_row * L

    lines = []
    for start in range(0, indices.size, per_row):
        row = indices[start:start + per_row].tolist()
        groups = [
            "".join(names[k].ljust(cell) for k in row[g:g + L])
            for g in range(0, len(row), L)
        ]
        lines.append(f"{start:>8}  " + " ".join(groups))
    return lines


def analyze_pattern(alphabet):
    """Print L, offsets and the base pattern."""
    print("\n" + "=" * 60)
    print("Base Pattern")
    print("=" * 60)

    L = calculate_l(alphabet)
    offsets = cumulative_offsets(alphabet)
    print(f"Alphabet: {format_alphabet(alphabet)}")
    print(f"L = {L}")
    print()
    for symbol in alphabet:
        start = offsets[symbol.name]
        print(f"  {symbol.name}: f = {symbol.frequency:<4} C = {start:<4} slots {start}..{start + symbol.frequency - 1}")
    print()
    pattern = generate_state_pattern(alphabet, L)
    print("Pattern: " + " ".join(info.symbol.name for info in pattern))


def analyze_window(alphabet, max_states, width):
    """Print the grid and the symbol distribution in the window."""
    print("\n" + "=" * 60)
    print(f"States 0..{max_states - 1}")
    print("=" * 60)

    for line in render_grid(alphabet, max_states, width):
        print(line)
    print()

    indices = state_symbol_indices(alphabet, max_states)
    counts = np.bincount(indices, minlength=len(alphabet))
    expected = probabilities(alphabet)
    costs = symbol_costs(alphabet)

    print("Symbol distribution:")
    for symbol, count, p in zip(alphabet, counts, expected):
        share = count / max(1, max_states) * 100
        print(f"  {symbol.name}: {int(count):,} states ({share:.2f}%, f/L = {p * 100:.2f}%), "
              f"{costs[symbol.name]:.3f} bits")
    print()
    print(f"Entropy: {entropy(expected):.3f} bits per symbol")


def analyze_chains(alphabet, max_states):
    """Decode chain lengths across the window."""
    print("\n" + "=" * 60)
    print("Decode Chains")
    print("=" * 60)

    lengths = np.array([
        len(calculate_edge_chain(n, alphabet, 0))
        for n in tqdm(range(max_states), desc="Walking chains", leave=False)
    ])
    if lengths.size == 0:
        print("No states in the window")
        return

    print(f"Roots (chain length 0): {np.sum(lengths == 0)}")
    print(f"Mean chain length:      {lengths.mean():.2f}")
    print(f"Longest chain:          {lengths.max()} (state {int(np.argmax(lengths))})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze the ANS state table of an alphabet.")
    parser.add_argument("--alphabet", default=DEFAULT_ALPHABET, help="Comma separated NAME:FREQUENCY pairs")
    parser.add_argument("--max-states", type=int, default=240, help="States to show")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="Characters per grid row")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        alphabet = parse_alphabet(args.alphabet)
    except ValueError as e:
        parser.error(str(e))
    if not alphabet:
        parser.error("alphabet is empty")
    if args.max_states < 1:
        parser.error("--max-states must be at least 1")

    print("=" * 60)
    print("ANS State Analysis")
    print("=" * 60)

    analyze_pattern(alphabet)
    analyze_window(alphabet, args.max_states, args.width)
    analyze_chains(alphabet, args.max_states)

    print("\n" + "=" * 60)
    print("Analysis Complete!")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
