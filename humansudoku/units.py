#!/usr/bin/env python

"""
humansudoku/units.py

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

**Index arithmetic for rows, columns and 3x3 blocks ("units").**

Every cell belongs to exactly one row, one column and one block. Within each
unit, cells are numbered by position 0-8: left to right for rows, top to
bottom for columns, and row-major for blocks. Blocks themselves are numbered
0-8 in row-major order, so block 5 is the middle-right one.

"""

from enum import Enum
import logging
from typing import Generator, List, Tuple

from humansudoku.common import N, RANK

log = logging.getLogger(__name__)


# =============================================================================
# UnitKind
# =============================================================================

class UnitKind(Enum):
    ROW = "row"
    COLUMN = "column"
    BLOCK = "block"

    def __str__(self) -> str:
        return self.value


UNIT_KINDS = (UnitKind.ROW, UnitKind.COLUMN, UnitKind.BLOCK)


# =============================================================================
# Index functions
# =============================================================================

def _check_index(name: str, value: int) -> None:
    if not 0 <= value < N:
        raise ValueError(f"{name} was {value}; must be in range 0 to {N - 1}")


def block_top_left(block_zb: int) -> Tuple[int, int]:
    """
    Returns ``row_zb, col_zb`` for the top-left cell of a block.
    """
    _check_index("block", block_zb)
    return (block_zb // RANK) * RANK, (block_zb % RANK) * RANK


def block_of(row_zb: int, col_zb: int) -> int:
    """
    Returns the (zero-based) number of the block containing this cell.
    """
    _check_index("row", row_zb)
    _check_index("col", col_zb)
    return (row_zb // RANK) * RANK + col_zb // RANK


def coordinates_of(kind: UnitKind, unit_zb: int,
                   position: int) -> Tuple[int, int]:
    """
    Maps a position within a unit to grid coordinates.

    Args:
        kind: row, column or block
        unit_zb: zero-based unit number
        position: zero-based position within the unit

    Returns:
        ``row_zb, col_zb``
    """
    _check_index(str(kind), unit_zb)
    _check_index("position", position)
    if kind == UnitKind.ROW:
        return unit_zb, position
    if kind == UnitKind.COLUMN:
        return position, unit_zb
    if kind == UnitKind.BLOCK:
        row_min, col_min = block_top_left(unit_zb)
        return row_min + position // RANK, col_min + position % RANK
    raise ValueError(f"Bad unit kind: {kind!r}")


def position_of(kind: UnitKind, row_zb: int,
                col_zb: int) -> Tuple[int, int]:
    """
    Inverse of :func:`coordinates_of`.

    Returns:
        ``unit_zb, position``
    """
    _check_index("row", row_zb)
    _check_index("col", col_zb)
    if kind == UnitKind.ROW:
        return row_zb, col_zb
    if kind == UnitKind.COLUMN:
        return col_zb, row_zb
    if kind == UnitKind.BLOCK:
        return (block_of(row_zb, col_zb),
                (row_zb % RANK) * RANK + col_zb % RANK)
    raise ValueError(f"Bad unit kind: {kind!r}")


# =============================================================================
# Unit
# =============================================================================

class Unit(object):
    """
    Represents a row, column, or 3x3 block within the Sudoku grid.
    """
    def __init__(self, kind: UnitKind, unit_zb: int) -> None:
        """
        Args:
            kind: row, column or block
            unit_zb: unit number, 0-8
        """
        _check_index(str(kind), unit_zb)
        self.kind = kind
        self.unit_zb = unit_zb
        self._cells = tuple(
            coordinates_of(kind, unit_zb, p) for p in range(N)
        )  # type: Tuple[Tuple[int, int], ...]

    def __str__(self) -> str:
        return f"{self.kind} {self.unit_zb + 1}"

    def __repr__(self) -> str:
        return f"Unit({self.kind.name}, {self.unit_zb})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.kind == other.kind and self.unit_zb == other.unit_zb

    def __hash__(self) -> int:
        return hash((self.kind, self.unit_zb))

    @property
    def cells(self) -> Tuple[Tuple[int, int], ...]:
        """
        ``(row_zb, col_zb)`` for the cells of this unit, in position order.
        """
        return self._cells

    def gen_cells(self) -> Generator[Tuple[int, int], None, None]:
        yield from self._cells

    def cell(self, position: int) -> Tuple[int, int]:
        _check_index("position", position)
        return self._cells[position]

    def position_of(self, row_zb: int, col_zb: int) -> int:
        """
        Position of a cell within this unit. The cell must be in the unit.
        """
        unit_zb, position = position_of(self.kind, row_zb, col_zb)
        assert unit_zb == self.unit_zb, (
            f"(row={row_zb + 1}, col={col_zb + 1}) is not in {self}"
        )
        return position

    def describe_position(self, position: int) -> str:
        """
        Human-readable location of a position, e.g. "column 4" within a row.
        """
        row, col = self.cell(position)
        if self.kind == UnitKind.ROW:
            return f"column {col + 1}"
        if self.kind == UnitKind.COLUMN:
            return f"row {row + 1}"
        return f"(row={row + 1}, col={col + 1})"


# =============================================================================
# All units
# =============================================================================

ALL_UNITS = tuple(
    Unit(kind, u) for kind in UNIT_KINDS for u in range(N)
)  # type: Tuple[Unit, ...]

ROWS = ALL_UNITS[0:N]
COLUMNS = ALL_UNITS[N:2 * N]
BLOCKS = ALL_UNITS[2 * N:3 * N]


def enumerate_units() -> Tuple[Unit, ...]:
    """
    The 27 units: rows 0-8, then columns 0-8, then blocks 0-8.
    """
    return ALL_UNITS


def units_of(row_zb: int, col_zb: int) -> List[Unit]:
    """
    The row, column and block that contain a cell.
    """
    return [
        ROWS[row_zb],
        COLUMNS[col_zb],
        BLOCKS[block_of(row_zb, col_zb)],
    ]


def peers(row_zb: int, col_zb: int) -> List[Tuple[int, int]]:
    """
    All cells sharing a unit with this one (excluding itself), in ascending
    row-major order. There are 20 of them.
    """
    found = set(
        rc for unit in units_of(row_zb, col_zb) for rc in unit.cells
    )
    found.discard((row_zb, col_zb))
    return sorted(found)
