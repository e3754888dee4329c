#!/usr/bin/env python

"""
humansudoku/grid.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

The grid: a 9x9 list of lists of ints, with 0 meaning "unknown".

"""

import logging
import numbers
from typing import Any, List, Sequence

from humansudoku.common import (
    EMPTY,
    InvalidInput,
    N,
    N_CELLS,
    NEWLINE,
    RANK,
    SPACE,
    UNKNOWN,
)

log = logging.getLogger(__name__)

Grid = List[List[int]]


# =============================================================================
# Creation
# =============================================================================

def empty_grid() -> Grid:
    return [
        [
            EMPTY for _col_zb in range(N)
        ] for _row_zb in range(N)
    ]


def _not_an_integer(raw: Any, row_zb: int, col_zb: int) -> InvalidInput:
    return InvalidInput(
        f"(row={row_zb + 1}, col={col_zb + 1}): value {raw!r} is not "
        f"an integer", row=row_zb, col=col_zb, value=raw)


def _cell_value(raw: Any, row_zb: int, col_zb: int,
                from_text: bool = False) -> int:
    """
    Converts one cell. Characters are only acceptable when the whole grid was
    given as a string; otherwise the value must be a genuine integer.
    """
    if from_text:
        if raw == UNKNOWN:
            return EMPTY
        if raw not in "0123456789":
            raise _not_an_integer(raw, row_zb, col_zb)
        value = int(raw)
    else:
        if isinstance(raw, bool) or not isinstance(raw, numbers.Integral):
            raise _not_an_integer(raw, row_zb, col_zb)
        value = int(raw)
    if not 0 <= value <= N:
        raise InvalidInput(
            f"(row={row_zb + 1}, col={col_zb + 1}): value {value} is "
            f"outside the range 0-{N}", row=row_zb, col=col_zb, value=value)
    return value


def make_grid(values: Any) -> Grid:
    """
    Builds a fresh grid from caller-supplied values. The caller's object is
    never modified or retained.

    Args:
        values:
            either 81 integers in row-major order, a string of 81
            characters using ``0`` or ``.`` for blanks, or 9 rows of 9
            integers.

    Raises:
        :exc:`InvalidInput` if the shape is wrong or a value is not an integer
        from 0 to 9.
    """
    if values is None:
        raise InvalidInput("No data")
    from_text = isinstance(values, str)
    if from_text:
        values = "".join(values.split())
    try:
        items = list(values)
    except TypeError:
        raise InvalidInput(f"Grid must be a sequence; got {values!r}")
    if len(items) == N_CELLS and not any(
            isinstance(x, (list, tuple)) for x in items):
        rows = [items[r * N:(r + 1) * N] for r in range(N)]
    elif len(items) == N:
        rows = []
        for row_zb, row in enumerate(items):
            try:
                row = list(row)
            except TypeError:
                raise InvalidInput(
                    f"Row {row_zb + 1} is not a sequence: {row!r}",
                    row=row_zb)
            if len(row) != N:
                raise InvalidInput(
                    f"Row {row_zb + 1} has {len(row)} cells; must have {N}",
                    row=row_zb)
            rows.append(row)
    else:
        raise InvalidInput(
            f"Grid must have {N_CELLS} cells or {N} rows; got {len(items)} "
            f"items")
    return [
        [
            _cell_value(rows[r][c], r, c, from_text=from_text)
            for c in range(N)
        ] for r in range(N)
    ]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


# =============================================================================
# Calculation helpers
# =============================================================================

def n_filled(grid: Grid) -> int:
    """
    Number of known cells.
    """
    return sum(1 for row in grid for v in row if v != EMPTY)


def is_complete(grid: Grid) -> bool:
    return n_filled(grid) == N_CELLS


# =============================================================================
# String representations
# =============================================================================

def grid_str(grid: Sequence[Sequence[int]]) -> str:
    """
    Creates a string representation of a grid, in the same format that
    :func:`humansudoku.puzzle.parse_puzzle` reads.
    """
    x = ""
    for row_zb in range(N):
        for col_zb in range(N):
            v = grid[row_zb][col_zb]
            x += str(v) if v != EMPTY else UNKNOWN
            if col_zb % RANK == RANK - 1 and col_zb < N - 1:
                x += SPACE
        if row_zb < N - 1:
            x += NEWLINE
            if row_zb % RANK == RANK - 1:
                x += NEWLINE
    return x


def grid_line(grid: Sequence[Sequence[int]]) -> str:
    """
    One-line, 81-character representation; ``.`` for unknown cells.
    """
    return "".join(
        str(v) if v != EMPTY else UNKNOWN for row in grid for v in row
    )
