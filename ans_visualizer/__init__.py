"""
ANS state visualizer: the state-transition structure of Asymmetric
Numeral Systems, for teaching.
"""
from .encoders.ans import (
    backward_state,
    calculate_edge_chain,
    calculate_forward_edges,
    calculate_l,
    encode_message,
    encoded_sequence,
    forward_state,
    generate_state_pattern,
    get_default_colors,
    symbol_at,
)
from .models import ForwardEdge, StateInfo, Symbol, default_alphabet, parse_alphabet

__version__ = "0.1.0"

__all__ = [
    "backward_state",
    "calculate_edge_chain",
    "calculate_forward_edges",
    "calculate_l",
    "encode_message",
    "encoded_sequence",
    "forward_state",
    "generate_state_pattern",
    "get_default_colors",
    "symbol_at",
    "ForwardEdge",
    "StateInfo",
    "Symbol",
    "default_alphabet",
    "parse_alphabet",
]
