#!/usr/bin/env python

"""
humansudoku/candidates.py

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

**Candidate tracking: which digits are still possible in which cells.**

Conceptually this is a three-dimensional matrix (row, col, digit) of booleans
indicating the possibility of a digit being in a particular cell. It is stored
as one 9-bit mask per cell, in a flat list of 81 ints; bit ``d - 1`` is set if
digit ``d`` is still possible. Eliminating a digit from a row/column/block is
then a handful of bitwise AND operations.

"""

import logging
from typing import Iterable, List, Tuple

from humansudoku.common import (
    DISPLAY_SOLVED,
    DISPLAY_UNKNOWN,
    N,
    N_CELLS,
    RANK,
    SPACE,
)

log = logging.getLogger(__name__)


# =============================================================================
# Bit helpers
# =============================================================================

ALL_DIGITS_MASK = (1 << N) - 1  # 0x1FF


def digit_bit(digit: int) -> int:
    """
    The bit for a genuine (one-based) digit.
    """
    return 1 << (digit - 1)


def mask_digits(mask: int) -> List[int]:
    """
    Digits (one-based, ascending) whose bits are set in the mask.
    """
    return [d for d in range(1, N + 1) if mask & (1 << (d - 1))]


def mask_count(mask: int) -> int:
    return bin(mask).count("1")


# =============================================================================
# CandidateSet
# =============================================================================

class CandidateSet(object):
    """
    Represents Sudoku candidates ("possibilities") for each cell.
    """
    def __init__(self, other: "CandidateSet" = None) -> None:
        """
        Initialize with "everything is possible", or copy from another.
        """
        if other is not None:
            self.masks = list(other.masks)
        else:
            self.masks = [ALL_DIGITS_MASK] * N_CELLS  # type: List[int]
            # ... index as: self.masks[row_zb * N + col_zb]

    def clone(self) -> "CandidateSet":
        return self.__class__(other=self)

    def restore(self, other: "CandidateSet") -> None:
        """
        Overwrites our state with another's.
        """
        self.masks[:] = other.masks

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self.masks == other.masks

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__}: "
                f"{self.n_possibilities_overall()} possibilities>")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def mask(self, row_zb: int, col_zb: int) -> int:
        return self.masks[row_zb * N + col_zb]

    def possible(self, row_zb: int, col_zb: int, digit: int) -> bool:
        """
        Is this (one-based) digit still possible in this cell?
        """
        return bool(self.masks[row_zb * N + col_zb] & digit_bit(digit))

    def possible_digits(self, row_zb: int, col_zb: int) -> List[int]:
        """
        Returns possible digits, in ONE-BASED format, for a given cell.
        They are always returned in ascending order.
        """
        return mask_digits(self.masks[row_zb * N + col_zb])

    def n_possibilities(self, row_zb: int, col_zb: int) -> int:
        """
        Number of possible digits for a cell.
        """
        return mask_count(self.masks[row_zb * N + col_zb])

    def n_possibilities_overall(self) -> int:
        """
        Number of row/cell/digit possibilities overall.
        Minimum is 81 (solved). Maximum is 729.
        """
        return sum(mask_count(m) for m in self.masks)

    def cells_admitting(self, cells: Iterable[Tuple[int, int]],
                        digit: int) -> List[Tuple[int, int]]:
        """
        The subset of ``cells`` in which ``digit`` is still possible.
        """
        bit = digit_bit(digit)
        return [
            (r, c) for r, c in cells
            if self.masks[r * N + c] & bit
        ]

    def as_tensor(self) -> List[List[List[bool]]]:
        """
        The 9x9x9 boolean view; index as ``[row_zb][col_zb][digit - 1]``.
        """
        return [
            [
                [
                    bool(self.masks[r * N + c] & (1 << d))
                    for d in range(N)
                ] for c in range(N)
            ] for r in range(N)
        ]

    # -------------------------------------------------------------------------
    # Modifications
    # -------------------------------------------------------------------------

    def set_only(self, row_zb: int, col_zb: int, digit: int) -> None:
        """
        Collapse a cell's candidates to the single (one-based) digit.
        """
        self.masks[row_zb * N + col_zb] = digit_bit(digit)

    def eliminate(self, cells: Iterable[Tuple[int, int]],
                  digit: int) -> int:
        """
        Removes a digit as a possibility from some cells.

        Returns: the number of cells that actually lost a candidate.
        """
        bit = digit_bit(digit)
        keep = ALL_DIGITS_MASK & ~bit
        n_changed = 0
        for r, c in cells:
            i = r * N + c
            if self.masks[i] & bit:
                self.masks[i] &= keep
                n_changed += 1
        return n_changed

    # -------------------------------------------------------------------------
    # Visuals
    # -------------------------------------------------------------------------

    @staticmethod
    def _pstr_row_col(row_zb: int, col_zb: int, digit_zb: int) \
            -> Tuple[int, int]:
        """
        For __str__(): ``row, col`` (``y, x``) coordinates.
        """
        t = RANK
        x_base = col_zb * (t + 1)
        y_base = row_zb * (t + 1)
        x_offset = digit_zb % t
        y_offset = digit_zb // t
        return (y_base + y_offset), (x_base + x_offset)

    def __str__(self) -> str:
        """
        Returns a visual representation of possibilities: each cell is a 3x3
        mini-grid of the digits still possible there.
        """
        pn = N * (RANK + 1) - 1
        t = RANK

        # BEWARE: [[" "] * pn] * pn would share one list between all lines.
        strings = [[SPACE] * pn for _ in range(pn)]  # type: List[List[str]]

        # Prettify
        cell_boundaries = [
            (t + 1) * t * k - 1 for k in range(1, t)
        ]
        for r in cell_boundaries:
            for i in range(pn):
                strings[r][i] = "-"
        for c in cell_boundaries:
            for i in range(pn):
                strings[i][c] = "|"
        for r in cell_boundaries:
            for c in cell_boundaries:
                strings[r][c] = "+"

        # Data
        for r in range(N):
            for c in range(N):
                cell_solved = self.n_possibilities(r, c) == 1
                for d_zb in range(N):
                    y, x = self._pstr_row_col(r, c, d_zb)
                    if self.possible(r, c, d_zb + 1):
                        txt = str(d_zb + 1)
                    elif cell_solved:
                        txt = DISPLAY_SOLVED
                    else:
                        txt = DISPLAY_UNKNOWN
                    strings[y][x] = txt
        return "\n".join("".join(line) for line in strings)
