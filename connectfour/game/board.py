"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class: a fixed-size grid of cells that pieces
are dropped into, plus outcome detection anchored at the most recent move.
"""

from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (DEFAULT_COLS, DEFAULT_ROWS, EMPTY, LINE_TARGET,
                               Outcome, PlayerSlot, validate_dimensions)


class LastMove(NamedTuple):
    row: int
    col: int
    slot: PlayerSlot


Snapshot = Tuple[Tuple[Optional[PlayerSlot], ...], ...]


def has_run(line: np.ndarray, value: int, length: int = LINE_TARGET) -> bool:
    """Return True if ``line`` holds ``length`` or more consecutive ``value`` cells."""
    run = 0
    for cell in line:
        run = run + 1 if cell == value else 0
        if run >= length:
            return True
    return False


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the board. Cells are only ever written by
    ``apply_move``, so every column is filled from the bottom up.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        """
        Create an empty board.

        Raises:
            ValueError: If rows or cols fall outside the allowed bounds
        """
        self._rows, self._cols = validate_dimensions(rows, cols)
        self._grid = np.full((rows, cols), EMPTY, dtype=np.int8)
        self._last_move: Optional[LastMove] = None
        debug.debug(f"Initializing {rows}x{cols} board", "board")

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def last_move(self) -> Optional[LastMove]:
        return self._last_move

    def in_range(self, col: int) -> bool:
        return 0 <= col < self._cols

    def is_column_full(self, col: int) -> bool:
        self._check_column(col)
        return self._grid[0, col] != EMPTY

    def column_height(self, col: int) -> int:
        """Number of pieces currently in ``col``."""
        self._check_column(col)
        return int(np.count_nonzero(self._grid[:, col]))

    def is_full(self) -> bool:
        # Gravity keeps the top row the last to fill
        return not np.any(self._grid[0] == EMPTY)

    def apply_move(self, col: int, slot: PlayerSlot) -> bool:
        """
        Drop a piece for ``slot`` into ``col``.

        Args:
            col: Column index (0-indexed)
            slot: The player making the move

        Returns:
            True if the piece was placed, False if the column is full

        Raises:
            IndexError: If ``col`` is not a column of this board
        """
        self._check_column(col)

        if self._grid[0, col] != EMPTY:
            debug.debug(f"Column {col} is full", "board")
            return False

        row = self._rows - 1
        while self._grid[row, col] != EMPTY:
            row -= 1

        self._grid[row, col] = slot.value
        self._last_move = LastMove(row, col, slot)
        debug.trace(f"Placed {slot.name} at ({row}, {col})", "board")
        return True

    def evaluate_outcome(self) -> Outcome:
        """
        Decide the outcome of the last move.

        Only lines passing through the last move are examined, so a win is
        always credited to the player who just moved. A winning move that
        also fills the board is a win, not a draw.

        Raises:
            RuntimeError: If no move has been applied yet
        """
        if self._last_move is None:
            raise RuntimeError("No move has been applied to this board")

        row, col, slot = self._last_move
        debug.start_timer("outcome")
        try:
            if any(has_run(line, slot.value) for line in self.lines_through(row, col)):
                debug.info(f"{slot.name} wins with move at ({row}, {col})", "board")
                return Outcome.win(slot)
            if self.is_full():
                debug.info("Board is full, game drawn", "board")
                return Outcome.DRAW
            return Outcome.CONTINUE
        finally:
            debug.end_timer("outcome", "board")

    def lines_through(self, row: int, col: int) -> List[np.ndarray]:
        """
        Project the four lines that pass through a cell.

        Returns:
            Vertical, horizontal, diagonal "\\" (upper-left to lower-right) and
            diagonal "/" (lower-left to upper-right), each spanning the whole
            board
        """
        if not (0 <= row < self._rows and self.in_range(col)):
            raise IndexError(f"Cell ({row}, {col}) is outside the board")

        grid = self._grid
        return [
            grid[:, col],
            grid[row, :],
            np.diagonal(grid, offset=col - row),
            np.diagonal(np.fliplr(grid), offset=(self._cols - 1 - col) - row)[::-1],
        ]

    def cell(self, row: int, col: int) -> Optional[PlayerSlot]:
        if not (0 <= row < self._rows and self.in_range(col)):
            raise IndexError(f"Cell ({row}, {col}) is outside the board")
        value = self._grid[row, col]
        return None if value == EMPTY else PlayerSlot(int(value))

    def snapshot(self) -> Snapshot:
        """Row-major view of the grid, ``None`` for empty cells."""
        return tuple(
            tuple(None if value == EMPTY else PlayerSlot(int(value)) for value in row)
            for row in self._grid
        )

    def get_state(self) -> np.ndarray:
        """Copy of the raw grid (0 empty, 1 first player, 2 second player)."""
        return self._grid.copy()

    def _check_column(self, col: int) -> None:
        if not self.in_range(col):
            raise IndexError(f"Column {col} is outside the board (0 - {self._cols - 1})")

    def __repr__(self) -> str:
        return f"Board(rows={self._rows}, cols={self._cols}, last_move={self._last_move})"
