#!/usr/bin/env python

"""
humansudoku/puzzles.py

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

Some puzzles to play with, in text format. Nothing in the solver reads these;
they are for the command line and for tests.

"""

from collections import OrderedDict

DEMO_SUDOKU_1 = """
# Coton 54, Coton Community News Dec 2019-Jan 2020

... ... ...
..2 3.1 45.
.1. ... .6.

.47 .5. 38.
... 7.3 ...
.36 ... 14.

.7. ... .9.
.91 4.5 6..
... ..9 ...
"""

EASY_SUDOKU = """
# Peter Norvig's "easy" example; singles alone suffice

..3 .2. 6..
9.. 3.5 ..1
..1 8.6 4..

..8 1.2 9..
7.. ... ..8
..6 7.8 2..

..2 6.9 5..
8.. 2.3 ..9
..5 .1. 3..
"""

WIKIPEDIA_SUDOKU = """
# The example from Wikipedia's Sudoku article

53. .7. ...
6.. 195 ...
.98 ... .6.

8.. .6. ..3
4.. 8.3 ..1
7.. .2. ..6

.6. ... 28.
... 419 ..5
... .8. .79
"""

HARD_SUDOKU = """
# Peter Norvig's "hard" example; needs more than singles

4.. ... 8.5
.3. ... ...
... 7.. ...

.2. ... .6.
... .8. 4..
... .1. ...

... 6.3 .7.
5.. 2.. ...
1.4 ... ...
"""

SEVENTEEN_SUDOKU = """
# 17 starting values, the fewest possible; singles alone suffice

... ... .1.
4.. ... ...
.2. ... ...

... .5. 4.7
..8 ... 3..
..1 .9. ...

3.. 4.. 2..
.5. 1.. ...
... 8.6 ...
"""

PUZZLES = OrderedDict([
    ("coton54", DEMO_SUDOKU_1),
    ("easy", EASY_SUDOKU),
    ("wikipedia", WIKIPEDIA_SUDOKU),
    ("seventeen", SEVENTEEN_SUDOKU),
    ("hard", HARD_SUDOKU),
])
