#!/usr/bin/env python

"""
humansudoku/__init__.py

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

**A Sudoku solver whose steps are transparent to humans.**

"""

from humansudoku.candidates import CandidateSet  # noqa
from humansudoku.common import Contradiction, InvalidInput, SolutionFailure  # noqa
from humansudoku.solver import (  # noqa
    Deduction,
    LogicSolver,
    Rule,
    SolveResult,
    Status,
    solve,
)
from humansudoku.units import Unit, UnitKind  # noqa
from humansudoku.validator import check, validate  # noqa
