#!/usr/bin/env python3
"""
Check the transition formulas over a preview window.

For every state n in the window:
1. Decoding the encode step of n with any symbol s gives back (n, s)
2. Encoding the decode step of a non-root n gives back n
3. The edge chain strictly decreases and ends at a root
4. Forward edges stay inside the window

Usage:
    python -m ans_visualizer.scripts.verify_transitions --alphabet A:3,B:2,C:1
"""
import argparse
import sys
from typing import List, Optional, Sequence

from tqdm import tqdm

from ..config import DEFAULT_ALPHABET
from ..encoders.ans import (
    backward_state,
    calculate_edge_chain,
    calculate_forward_edges,
    calculate_l,
    forward_state,
    symbol_at,
)
from ..models.alphabet import format_alphabet, parse_alphabet
from ..models.base import Symbol


def check_state(n: int, alphabet: Sequence[Symbol], max_states: int) -> List[str]:
    """Return a description of every property that fails at state n."""
    problems = []
    first_frequency = alphabet[0].frequency

    for symbol in alphabet:
        encoded = forward_state(n, symbol, alphabet)
        decoded = backward_state(encoded, alphabet)
        if decoded != (n, symbol):
            problems.append(f"state {n}: encode {symbol.name} -> {encoded} decodes to {decoded}")

    if n >= first_frequency:
        prev, symbol = backward_state(n, alphabet)
        if symbol != symbol_at(n, alphabet) or forward_state(prev, symbol, alphabet) != n:
            problems.append(f"state {n}: decode -> ({prev}, {symbol.name}) does not encode back")

    # One leading repeat puts the root at the end
    chain = calculate_edge_chain(n, alphabet, 1)
    root = chain[-1]
    is_root = root < first_frequency or backward_state(root, alphabet)[0] == root
    if any(a <= b for a, b in zip(chain, chain[1:])) or not is_root:
        problems.append(f"state {n}: bad chain {chain}")

    for edge in calculate_forward_edges(n, alphabet, max_states):
        if not 0 <= edge.to_state < max_states:
            problems.append(f"state {n}: forward edge to {edge.to_state} outside window")

    return problems


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check ANS transitions over a window of states.")
    parser.add_argument("--alphabet", default=DEFAULT_ALPHABET, help="Comma separated NAME:FREQUENCY pairs")
    parser.add_argument("--max-states", type=int, default=1000, help="States to check")
    args = parser.parse_args(argv)

    alphabet = parse_alphabet(args.alphabet)
    if not alphabet:
        raise ValueError("alphabet is empty")

    print("=" * 60)
    print("Transition Check")
    print("=" * 60)
    print(f"Alphabet: {format_alphabet(alphabet)}  (L = {calculate_l(alphabet)})")
    print(f"States:   0..{args.max_states - 1}")
    print()

    problems = []
    for n in tqdm(range(args.max_states), desc="Checking", leave=False):
        problems.extend(check_state(n, alphabet, args.max_states))

    if problems:
        for problem in problems[:20]:
            print(f"  {problem}")
        if len(problems) > 20:
            print(f"  ... and {len(problems) - 20} more")
        raise AssertionError(f"{len(problems)} transition checks failed")

    print()
    print("=" * 60)
    print("TEST PASSED!")
    print("=" * 60)
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    try:
        return main(argv)
    except (AssertionError, ValueError, RuntimeError) as e:
        print()
        print("=" * 60)
        print(f"TEST FAILED: {e}")
        print("=" * 60)
        return 1


if __name__ == '__main__':
    sys.exit(run())
