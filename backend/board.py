# backend/board.py

import random
import logging
import numbers
from collections import deque

from .errors import InvalidConfigurationError
from .utils import get_neighbors

logger = logging.getLogger(__name__)

MINE = -1


class MinesweeperBoard:
    def __init__(self, rows, cols, num_mines, seed=None, mine_positions=None):
        """
        seed:
            Seeds the board's own random.Random instance, so two boards built
            with the same seed get the same layout.

        mine_positions:
            Optional iterable of (row, col) cells to use as mines instead of
            random placement. Its length must equal num_mines.
        """
        self.rows = rows
        self.cols = cols
        self.num_mines = num_mines
        self.seed = seed
        self.fixed_mines = [tuple(p) for p in mine_positions] if mine_positions is not None else None
        self.rng = random.Random(seed)

        self.board = []     # -1 = mine, 0–8 = adjacent mine counts
        self.revealed = []  # bool grid
        self.flags = []     # bool grid

        self.initialize()

    def initialize(self):
        """
        Clear all cell state, scatter the mines and precompute neighbor counts.
        Raises InvalidConfigurationError before touching any state.
        """
        self._validate()

        self.board = [[0 for _ in range(self.cols)] for _ in range(self.rows)]
        self.revealed = [[False for _ in range(self.cols)] for _ in range(self.rows)]
        self.flags = [[False for _ in range(self.cols)] for _ in range(self.rows)]

        self._place_mines()
        self._compute_adjacent_counts()

    def _validate(self):
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigurationError(
                f"Board must be at least 1x1, got {self.rows}x{self.cols}"
            )
        total = self.rows * self.cols
        if self.num_mines < 0 or self.num_mines >= total:
            raise InvalidConfigurationError(
                f"Cannot place {self.num_mines} mines: mine count must be below {total} cells."
            )

        if self.fixed_mines is None:
            return
        if len(set(self.fixed_mines)) != len(self.fixed_mines):
            raise InvalidConfigurationError("Duplicate cells in mine_positions")
        if len(self.fixed_mines) != self.num_mines:
            raise InvalidConfigurationError(
                f"Expected {self.num_mines} mine positions, got {len(self.fixed_mines)}"
            )
        for r, c in self.fixed_mines:
            if not self.is_valid_coord(r, c):
                raise InvalidConfigurationError(f"Mine position ({r}, {c}) is off the board")

    def _place_mines(self):
        if self.fixed_mines is not None:
            for r, c in self.fixed_mines:
                self.board[r][c] = MINE
            return

        # Rejection sampling: redraw until an empty cell comes up
        placed = 0
        while placed < self.num_mines:
            r = self.rng.randrange(self.rows)
            c = self.rng.randrange(self.cols)
            if self.board[r][c] != MINE:
                self.board[r][c] = MINE
                placed += 1

    def _compute_adjacent_counts(self):
        for r in range(self.rows):
            for c in range(self.cols):
                if self.board[r][c] == MINE:
                    continue
                count = 0
                for nr, nc in self._neighbors(r, c):
                    if self.board[nr][nc] == MINE:
                        count += 1
                self.board[r][c] = count

    def _neighbors(self, row, col):
        return get_neighbors(row, col, self.rows, self.cols)

    def is_valid_coord(self, row, col):
        return (
            _is_index(row) and _is_index(col)
            and 0 <= row < self.rows and 0 <= col < self.cols
        )

    def reveal(self, row, col):
        """
        Reveal (row, col) and return the list of cells newly revealed, in order.

        - Out of bounds or already revealed: nothing happens, returns [].
        - A mine is revealed on its own: returns [(row, col)].
        - A numbered cell is revealed on its own.
        - A 0 cell flood-fills through its neighbors; the fill stops at
          numbered cells. Uses a work-list, so board size is not limited by
          the recursion depth.
        """
        if not self.is_valid_coord(row, col):
            logger.debug("Ignoring reveal outside the board at (%s, %s)", row, col)
            return []
        row, col = int(row), int(col)
        if self.revealed[row][col]:
            return []

        if self.board[row][col] == MINE:
            self.revealed[row][col] = True
            return [(row, col)]

        opened = []
        pending = deque([(row, col)])
        while pending:
            r, c = pending.popleft()
            if self.revealed[r][c]:
                continue
            self.revealed[r][c] = True
            opened.append((r, c))
            if self.board[r][c] == 0:
                for nr, nc in self._neighbors(r, c):
                    if not self.revealed[nr][nc]:
                        pending.append((nr, nc))
        return opened

    def flag(self, row, col):
        """
        Flag (row, col). A flag is permanent: the cell also counts as
        revealed from then on. Returns True if the cell was flagged.
        """
        if not self.is_valid_coord(row, col):
            logger.debug("Ignoring flag outside the board at (%s, %s)", row, col)
            return False
        row, col = int(row), int(col)
        if self.revealed[row][col]:
            return False
        self.flags[row][col] = True
        self.revealed[row][col] = True
        return True

    def is_mine(self, row, col):
        return self.is_valid_coord(row, col) and self.board[int(row)][int(col)] == MINE

    def is_revealed(self, row, col):
        return self.is_valid_coord(row, col) and self.revealed[int(row)][int(col)]

    def is_flagged(self, row, col):
        return self.is_valid_coord(row, col) and self.flags[int(row)][int(col)]

    def neighbor_count(self, row, col):
        return self.board[row][col]

    def mine_positions(self):
        return [
            (r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if self.board[r][c] == MINE
        ]

    def is_complete(self):
        for r in range(self.rows):
            for c in range(self.cols):
                if self.board[r][c] != MINE and not self.revealed[r][c]:
                    return False
        return True

    def get_visible_state(self, game_over_flag=False, game_won_flag=False):
        state = []
        for r in range(self.rows):
            row_cells = []
            for c in range(self.cols):
                if self.flags[r][c]:
                    row_cells.append("F")
                elif self.board[r][c] == MINE:
                    if self.revealed[r][c]:
                        # The mine that was clicked
                        row_cells.append("*")
                    elif game_over_flag and game_won_flag:
                        row_cells.append("F")
                    elif game_over_flag:
                        row_cells.append("M")
                    else:
                        row_cells.append(None)
                elif self.revealed[r][c]:
                    row_cells.append(self.board[r][c])
                else:
                    row_cells.append(None)
            state.append(row_cells)
        return state


def _is_index(value):
    # Whole numbers only; bools, floats and strings are never cell indices
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
