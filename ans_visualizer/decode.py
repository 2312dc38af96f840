#!/usr/bin/env python3
"""
Decode an ANS state back into the message it encodes.

The script walks the edge chain from STATE down to its root, prints each
decode step, the encoded sequence, and the forward edges that leave STATE
inside the preview window.

Usage:
    python -m ans_visualizer.decode 44
    python -m ans_visualizer.decode 44 --alphabet A:3,B:2,C:1 --leading 2
"""
import argparse
from typing import List, Optional

from .config import DEFAULT_ALPHABET, DEFAULT_MAX_STATES
from .encoders.ans import (
    backward_state,
    calculate_edge_chain,
    calculate_forward_edges,
    encoded_sequence,
)
from .models.alphabet import format_alphabet, parse_alphabet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode an ANS state.")
    parser.add_argument("state", type=int, help="State to decode")
    parser.add_argument("--alphabet", default=DEFAULT_ALPHABET, help="Comma separated NAME:FREQUENCY pairs")
    parser.add_argument("--leading", type=int, default=0, help="Number of leading first symbols to show")
    parser.add_argument("--max-states", type=int, default=DEFAULT_MAX_STATES, help="Preview window size")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.state < 0:
        parser.error("state must be non-negative")
    if args.leading < 0:
        parser.error("--leading must be non-negative")
    try:
        alphabet = parse_alphabet(args.alphabet)
    except ValueError as e:
        parser.error(str(e))
    if not alphabet:
        parser.error("alphabet is empty")

    chain = calculate_edge_chain(args.state, alphabet, args.leading)
    message = encoded_sequence(args.state, alphabet, args.leading)
    edges = calculate_forward_edges(args.state, alphabet, args.max_states)

    print("=" * 60)
    print("ANS Decode")
    print("=" * 60)
    print(f"Alphabet: {format_alphabet(alphabet)}")
    print(f"State:    {args.state}")
    print()

    print("Decode steps:")
    steps = chain[:len(chain) - args.leading]
    for state in steps:
        prev, symbol = backward_state(state, alphabet)
        print(f"  {state:>12} -> {prev:<12} emits {symbol.name}")
    if not steps:
        print("  (root state, nothing to decode)")
    print()

    print(f"Chain:            {' -> '.join(str(s) for s in chain)}")
    print(f"Encoded sequence: {' → '.join(s.name for s in message)}")
    print()

    print(f"Forward edges (states < {args.max_states}):")
    for edge in edges:
        print(f"  {args.state} --{edge.symbol.name}--> {edge.to_state}")
    if not edges:
        print("  (none inside the window)")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
