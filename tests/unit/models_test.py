"""Tests for ship shapes, orientations and the standard fleet."""

from __future__ import annotations

import pytest

from src.salvo.core.errors import PlacementError
from src.salvo.game.models import (
    CARRIER,
    ORIENTATIONS,
    STANDARD_FLEET,
    Coord,
    Placement,
    ShipShape,
    fleet_cell_count,
    make_mask,
)

STANDARD_FLEET_CELLS = 17
ORIENTATION_COUNT = 8


class TestShipShape:
    def test_carrier_geometry(self: TestShipShape) -> None:
        """The carrier is a 3x2 box with one blank corner."""
        assert CARRIER.height == 3
        assert CARRIER.width == 2
        assert CARRIER.cell_count == 5
        assert (2, 0) not in CARRIER.footprint()

    def test_standard_fleet_cell_total(self: TestShipShape) -> None:
        """5 + 4 + 3 + 3 + 2."""
        assert fleet_cell_count(STANDARD_FLEET) == STANDARD_FLEET_CELLS

    @pytest.mark.parametrize(
        "rows",
        [[], [[]], [[1, 1], [1]], [[0, 0], [0, 0]]],
    )
    def test_malformed_masks_rejected(self: TestShipShape, rows: list[list[int]]) -> None:
        """Empty, ragged and blank masks are refused."""
        with pytest.raises(PlacementError):
            ShipShape("Bad", make_mask(rows))

    def test_shape_is_immutable(self: TestShipShape) -> None:
        """Shapes are frozen."""
        with pytest.raises(AttributeError):
            CARRIER.count = 3  # type: ignore[misc]


class TestPlacement:
    def test_eight_orientations_in_fixed_order(self: TestPlacement) -> None:
        """Rows-major variants come first."""
        assert len(ORIENTATIONS) == ORIENTATION_COUNT
        assert ORIENTATIONS[0] == Placement(1, 1, rows_major=True)
        assert ORIENTATIONS[3] == Placement(-1, -1, rows_major=True)
        assert ORIENTATIONS[4] == Placement(1, 1, rows_major=False)
        assert ORIENTATIONS[-1] == Placement(-1, -1, rows_major=False)

    def test_rows_major_mapping(self: TestPlacement) -> None:
        """Mask rows follow the row step."""
        placement = Placement(-1, 1, rows_major=True)
        assert placement.cell(Coord(5, 5), 2, 1) == Coord(3, 6)

    def test_columns_major_swaps_axes(self: TestPlacement) -> None:
        """Mask rows follow the column step."""
        placement = Placement(1, -1, rows_major=False)
        assert placement.cell(Coord(5, 5), 2, 1) == Coord(6, 3)

    def test_neighbours(self: TestPlacement) -> None:
        """Only the four edge neighbours, unclipped."""
        assert set(Coord(0, 0).neighbours()) == {
            Coord(-1, 0), Coord(1, 0), Coord(0, -1), Coord(0, 1),
        }
