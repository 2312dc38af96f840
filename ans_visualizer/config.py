"""
Configuration for the ANS state visualizer.
"""
import os

# Alphabet
MAX_SYMBOLS = 26                   # A..Z in the input form
DEFAULT_ALPHABET = "A:3,B:2,C:1"   # L = 6

# Preview window
DEFAULT_MAX_STATES = int(os.environ.get("ANS_MAX_STATES", 5000))
GRID_WIDTH = int(os.environ.get("ANS_GRID_WIDTH", 96))  # Characters per report row

# Backward walks shrink the state every step; anything longer is a bug
MAX_CHAIN_STEPS = 100_000

# Display palette, cycled by symbol position
DEFAULT_COLORS = (
    "#64B5F6",  # light blue
    "#F06292",  # light pink
    "#BA68C8",  # light purple
    "#FFB74D",  # light orange
    "#81C784",  # light green
    "#E57373",  # light red
    "#4DD0E1",  # light cyan
    "#9575CD",  # medium purple
    "#FF8A65",  # coral
    "#A1887F",  # light brown
)
