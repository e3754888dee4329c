#!/usr/bin/env python

"""
humansudoku/common.py

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

Common constants, exceptions and functions for the Sudoku solver.

"""

import logging
import sys
import traceback
from typing import Callable, Optional

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

RANK = 3
N = RANK ** 2  # 9
N_CELLS = N * N  # 81
DIGITS = tuple(range(1, N + 1))
EMPTY = 0

UNKNOWN = "."
NEWLINE = "\n"
SPACE = " "
HASH = "#"
DISPLAY_UNKNOWN = "·"
DISPLAY_SOLVED = "■"
ALMOST_ONE = 0.99

EXIT_FAILURE = 1
EXIT_SUCCESS = 0

CELL = "cell"  # kind of a Contradiction that concerns a single cell


# =============================================================================
# Exceptions
# =============================================================================

class SolutionFailure(Exception):
    pass


class InvalidInput(ValueError):
    """
    The grid handed to us is malformed: wrong shape, or a value that isn't a
    digit from 0 to 9. Raised before any solving is attempted.
    """
    def __init__(self, msg: str,
                 row: Optional[int] = None,
                 col: Optional[int] = None,
                 value: object = None) -> None:
        super().__init__(msg)
        self.row = row
        self.col = col
        self.value = value


class Contradiction(SolutionFailure):
    """
    The current state cannot extend to a valid solution.

    Either a cell has no remaining candidates (``kind == CELL``, with ``row``
    and ``col`` set), or some digit has nowhere to go within a unit (``kind``
    is the :class:`humansudoku.units.UnitKind`, ``index`` the zero-based unit
    number and ``value`` the digit). Duplicate givens are also reported this
    way: ``kind``/``index`` identify the unit and ``value`` the repeated digit.

    Row, column, unit and digit numbers are stored zero-based except the digit
    itself, which is a genuine 1-9 value.
    """
    def __init__(self,
                 kind: object,
                 index: Optional[int] = None,
                 value: Optional[int] = None,
                 row: Optional[int] = None,
                 col: Optional[int] = None,
                 reason: str = "") -> None:
        self.kind = kind
        self.index = index
        self.value = value
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(self.describe())

    def describe(self) -> str:
        if self.kind == CELL:
            reason = self.reason or "no possible values"
            return (f"Inconsistent state: (row={self.row + 1}, "
                    f"col={self.col + 1}) has {reason}")
        reason = self.reason or "no possible location"
        return (f"Inconsistent state in {self.kind} {self.index + 1}: "
                f"digit {self.value} has {reason}")

    @property
    def is_cell(self) -> bool:
        return self.kind == CELL


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
