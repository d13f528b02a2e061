# backend/utils.py

from typing import List, Tuple

import numpy as np

NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),          (0, 1),
    (1, -1), (1, 0), (1, 1)
]

# Integer codes for the visible-state symbols
HIDDEN = -3
FLAGGED = -2
MINE = -1
EXPLODED = -4


def get_neighbors(row: int, col: int, rows: int, cols: int) -> List[Tuple[int, int]]:
    """
    Return a list of valid neighboring coordinates (8-way) for (row, col).
    """
    neighbors = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            neighbors.append((nr, nc))
    return neighbors


def encode_visible_state(visible: List[List]) -> np.ndarray:
    """
    Encode a visible board (None / 0-8 / "F" / "M" / "*") as an int array.
    -3 hidden, -2 flagged, -1 mine, -4 exploded mine, 0-8 revealed counts.
    """
    encoded = []
    for row in visible:
        encoded_row = []
        for cell in row:
            if cell is None:
                encoded_row.append(HIDDEN)
            elif cell == "F":
                encoded_row.append(FLAGGED)
            elif cell == "M":
                encoded_row.append(MINE)
            elif cell == "*":
                encoded_row.append(EXPLODED)
            else:
                encoded_row.append(cell)
        encoded.append(encoded_row)
    return np.array(encoded, dtype=int)
