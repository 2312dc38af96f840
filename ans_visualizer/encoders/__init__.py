"""
ANS state-transition engine.
"""
from .ans import (
    TransitionTables,
    backward_state,
    build_tables,
    calculate_edge_chain,
    calculate_forward_edges,
    calculate_l,
    color_for_index,
    cumulative_offsets,
    encode_message,
    encoded_sequence,
    forward_state,
    generate_state_pattern,
    get_default_colors,
    state_symbol_indices,
    symbol_at,
)

__all__ = [
    "TransitionTables",
    "backward_state",
    "build_tables",
    "calculate_edge_chain",
    "calculate_forward_edges",
    "calculate_l",
    "color_for_index",
    "cumulative_offsets",
    "encode_message",
    "encoded_sequence",
    "forward_state",
    "generate_state_pattern",
    "get_default_colors",
    "state_symbol_indices",
    "symbol_at",
]
