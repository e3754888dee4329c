"""
Tests for humansudoku.units.
"""

import pytest

from humansudoku.units import (
    ALL_UNITS,
    BLOCKS,
    COLUMNS,
    ROWS,
    Unit,
    UnitKind,
    UNIT_KINDS,
    block_of,
    block_top_left,
    coordinates_of,
    enumerate_units,
    peers,
    position_of,
    units_of,
)


def test_block_top_left():
    assert block_top_left(0) == (0, 0)
    assert block_top_left(4) == (3, 3)
    assert block_top_left(5) == (3, 6)
    assert block_top_left(7) == (6, 3)
    assert block_top_left(8) == (6, 6)


def test_block_of():
    assert block_of(0, 0) == 0
    assert block_of(2, 8) == 2
    assert block_of(4, 4) == 4
    assert block_of(8, 0) == 6
    assert block_of(8, 8) == 8


@pytest.mark.parametrize("kind", UNIT_KINDS)
def test_each_kind_covers_every_cell_once(kind):
    seen = [
        coordinates_of(kind, u, p) for u in range(9) for p in range(9)
    ]
    assert len(set(seen)) == 81
    assert set(seen) == set((r, c) for r in range(9) for c in range(9))


@pytest.mark.parametrize("kind", UNIT_KINDS)
def test_position_of_inverts_coordinates_of(kind):
    for u in range(9):
        for p in range(9):
            r, c = coordinates_of(kind, u, p)
            assert position_of(kind, r, c) == (u, p)


def test_coordinates_of_examples():
    assert coordinates_of(UnitKind.ROW, 2, 5) == (2, 5)
    assert coordinates_of(UnitKind.COLUMN, 2, 5) == (5, 2)
    # Block 5 starts at (3, 6); position 4 is its centre.
    assert coordinates_of(UnitKind.BLOCK, 5, 4) == (4, 7)
    assert coordinates_of(UnitKind.BLOCK, 5, 8) == (5, 8)


@pytest.mark.parametrize("args", [
    (UnitKind.ROW, 9, 0),
    (UnitKind.COLUMN, 0, 9),
    (UnitKind.BLOCK, -1, 0),
])
def test_coordinates_of_rejects_bad_indices(args):
    with pytest.raises(ValueError):
        coordinates_of(*args)


def test_enumerate_units_order():
    units = enumerate_units()
    assert len(units) == 27
    assert [u.kind for u in units[:9]] == [UnitKind.ROW] * 9
    assert [u.kind for u in units[9:18]] == [UnitKind.COLUMN] * 9
    assert [u.kind for u in units[18:]] == [UnitKind.BLOCK] * 9
    assert [u.unit_zb for u in units[18:]] == list(range(9))
    assert units == ALL_UNITS
    assert ROWS + COLUMNS + BLOCKS == ALL_UNITS


def test_unit_cells_in_position_order():
    block = Unit(UnitKind.BLOCK, 4)
    assert block.cells == (
        (3, 3), (3, 4), (3, 5),
        (4, 3), (4, 4), (4, 5),
        (5, 3), (5, 4), (5, 5),
    )
    assert block.position_of(5, 4) == 7
    assert block.cell(7) == (5, 4)
    assert list(block.gen_cells()) == list(block.cells)


def test_unit_equality_and_str():
    assert Unit(UnitKind.ROW, 3) == Unit(UnitKind.ROW, 3)
    assert Unit(UnitKind.ROW, 3) != Unit(UnitKind.COLUMN, 3)
    assert len({Unit(UnitKind.BLOCK, 1), Unit(UnitKind.BLOCK, 1)}) == 1
    assert str(Unit(UnitKind.COLUMN, 0)) == "column 1"


def test_describe_position():
    assert Unit(UnitKind.ROW, 0).describe_position(3) == "column 4"
    assert Unit(UnitKind.COLUMN, 0).describe_position(3) == "row 4"
    assert Unit(UnitKind.BLOCK, 8).describe_position(0) == "(row=7, col=7)"


def test_units_of_and_peers():
    row, col, block = units_of(4, 7)
    assert row == Unit(UnitKind.ROW, 4)
    assert col == Unit(UnitKind.COLUMN, 7)
    assert block == Unit(UnitKind.BLOCK, 5)
    p = peers(4, 7)
    assert len(p) == 20
    assert (4, 7) not in p
    assert (4, 0) in p and (0, 7) in p and (3, 6) in p
    assert (0, 0) not in p
