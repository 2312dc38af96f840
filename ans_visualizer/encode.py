#!/usr/bin/env python3
"""
Encode a message into a single ANS state.

This script:
1. Takes the alphabet from --alphabet, or estimates it from the message
2. Applies the encode step once per symbol, starting at --initial-state
3. Prints every visited state and the final state

Usage:
    python -m ans_visualizer.encode ABACAB
    python -m ans_visualizer.encode ABACAB --alphabet A:3,B:2,C:1
"""
import argparse
import math
from typing import List, Optional

from .encoders.ans import calculate_l, encode_message
from .models.alphabet import format_alphabet, parse_alphabet
from .models.statistical import alphabet_from_message, symbol_costs


def leading_count(message: str, name: str) -> int:
    """How many times `name` opens the message.

    Encoding the first symbol from a root state stays on that root, so
    these occurrences are invisible in the final state.
    """
    count = 0
    for symbol in message:
        if symbol != name:
            break
        count += 1
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Encode a message into an ANS state.")
    parser.add_argument("message", help="Symbols to encode, one character each")
    parser.add_argument(
        "--alphabet",
        help="Comma separated NAME:FREQUENCY pairs (default: counts from the message)",
    )
    parser.add_argument("--initial-state", type=int, default=0, help="State before the first symbol")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.alphabet:
            alphabet = parse_alphabet(args.alphabet)
        else:
            alphabet = alphabet_from_message(args.message)
        states = encode_message(args.message, alphabet, initial_state=args.initial_state)
    except (ValueError, KeyError) as e:
        parser.error(str(e))

    costs = symbol_costs(alphabet)
    final = states[-1]

    print("=" * 60)
    print("ANS Encode")
    print("=" * 60)
    print(f"Alphabet: {format_alphabet(alphabet)}")
    print(f"L:        {calculate_l(alphabet)}")
    print(f"Message:  {args.message}")
    print()

    print(f"  start  state {states[0]}")
    for symbol, state in zip(args.message, states[1:]):
        print(f"  {symbol:>5}  state {state:<12} (+{costs[symbol]:.3f} bits)")
    print()

    ideal_bits = sum(costs[s] for s in args.message)
    print(f"Final state:     {final}")
    print(f"log2(state + 1): {math.log2(final + 1):.3f} bits")
    print(f"Ideal size:      {ideal_bits:.3f} bits")
    # Decoding only stops at the initial state when that state is a root
    if args.initial_state < alphabet[0].frequency:
        print()
        print(f"Decode with: ans-decode {final} --alphabet {format_alphabet(alphabet)} "
              f"--leading {leading_count(args.message, alphabet[0].name)}")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
