"""Unit tests for room outline resolution.

These tests verify:
- Rectangles resolve to four walls and L-shapes to seven
- Walls form a closed clockwise loop in plan coordinates
- Perimeter equals the sum of wall lengths and does not depend on the corner
- Opening placement, fit checks and percent positions
"""

import math

import pytest

from renobudget.domain.entities import Opening, RoomGeometry
from renobudget.domain.exceptions import InvalidGeometry
from renobudget.domain.services.geometry import (
    check_opening_fits,
    compute_floor_area,
    compute_perimeter,
    find_wall,
    place_opening,
    position_from_percent,
    resolve_room_walls,
    resolve_walls,
    validate_openings,
)
from renobudget.domain.value_objects import (
    LShapeCorner,
    Meters,
    OpeningType,
    Point2D,
    RoomDimensions,
    RoomShape,
    WallDirection,
)


def _l_dimensions(
    main_width: float = 4.0,
    main_length: float = 4.0,
    secondary_width: float = 2.0,
    secondary_length: float = 2.0,
) -> RoomDimensions:
    return RoomDimensions(
        main_width=Meters(main_width),
        main_length=Meters(main_length),
        height=Meters(2.5),
        secondary_width=Meters(secondary_width),
        secondary_length=Meters(secondary_length),
    )


RECTANGLE = RoomDimensions(main_width=Meters(3.0), main_length=Meters(4.0), height=Meters(2.5))


class TestRectangleWalls:
    """Tests for rectangular outlines."""

    def test_four_walls(self) -> None:
        """Rectangles have exactly four walls with ids 0-3."""
        walls = resolve_walls(RoomShape.RECTANGLE, RECTANGLE)

        assert len(walls) == 4
        assert [w.id for w in walls] == [0, 1, 2, 3]
        assert [w.name for w in walls] == ["Top", "Right", "Bottom", "Left"]

    def test_wall_lengths_follow_dimensions(self) -> None:
        """Top and bottom run along main_length, sides along main_width."""
        walls = resolve_walls(RoomShape.RECTANGLE, RECTANGLE)

        assert [w.length for w in walls] == [4.0, 3.0, 4.0, 3.0]

    def test_coordinates_are_clockwise_from_origin(self) -> None:
        """Walls start at the north-west corner and run clockwise."""
        walls = resolve_walls(RoomShape.RECTANGLE, RECTANGLE)

        assert walls[0].start == Point2D(0.0, 0.0)
        assert walls[0].end == Point2D(4.0, 0.0)
        assert walls[1].end == Point2D(4.0, 3.0)
        assert walls[2].end == Point2D(0.0, 3.0)
        assert walls[3].end == Point2D(0.0, 0.0)

    def test_directions(self) -> None:
        """Top and bottom are horizontal, sides vertical."""
        walls = resolve_walls(RoomShape.RECTANGLE, RECTANGLE)

        assert [w.direction for w in walls] == [
            WallDirection.HORIZONTAL,
            WallDirection.VERTICAL,
            WallDirection.HORIZONTAL,
            WallDirection.VERTICAL,
        ]

    def test_secondary_dimensions_are_ignored(self) -> None:
        """A rectangle with extension fields still has four walls."""
        walls = resolve_walls(RoomShape.RECTANGLE, _l_dimensions(), LShapeCorner.TOP_LEFT)

        assert len(walls) == 4

    def test_accepts_string_shape(self) -> None:
        """Shape values may be given as strings."""
        assert len(resolve_walls("rectangle", RECTANGLE)) == 4


class TestLShapeWalls:
    """Tests for L-shaped outlines."""

    @pytest.mark.parametrize("corner", list(LShapeCorner))
    def test_seven_walls_for_every_corner(self, corner: LShapeCorner) -> None:
        """L-shapes have exactly seven walls whatever the corner."""
        walls = resolve_walls(RoomShape.L_SHAPE, _l_dimensions(), corner)

        assert len(walls) == 7
        assert [w.id for w in walls] == list(range(7))

    @pytest.mark.parametrize("corner", list(LShapeCorner))
    def test_walls_form_closed_loop(self, corner: LShapeCorner) -> None:
        """Each wall ends where the next one starts."""
        walls = resolve_walls(RoomShape.L_SHAPE, _l_dimensions(3.0, 5.0, 1.5, 2.0), corner)

        for wall, following in zip(walls, walls[1:] + walls[:1]):
            assert wall.end == following.start

    @pytest.mark.parametrize("corner", list(LShapeCorner))
    def test_lengths_match_coordinates(self, corner: LShapeCorner) -> None:
        """Each wall's length is the distance between its end points."""
        walls = resolve_walls(RoomShape.L_SHAPE, _l_dimensions(3.0, 5.0, 1.5, 2.0), corner)

        for wall in walls:
            distance = math.hypot(wall.end.x - wall.start.x, wall.end.y - wall.start.y)
            assert distance == pytest.approx(wall.length)

    @pytest.mark.parametrize("corner", list(LShapeCorner))
    def test_direction_matches_axis(self, corner: LShapeCorner) -> None:
        """Horizontal walls keep y constant, vertical walls keep x constant."""
        walls = resolve_walls(RoomShape.L_SHAPE, _l_dimensions(3.0, 5.0, 1.5, 2.0), corner)

        for wall in walls:
            if wall.direction == WallDirection.HORIZONTAL:
                assert wall.start.y == wall.end.y
            else:
                assert wall.start.x == wall.end.x

    def test_shared_edge_is_split_at_junction(self) -> None:
        """With the extension top right, the north edge is two walls."""
        walls = resolve_walls(
            RoomShape.L_SHAPE, _l_dimensions(3.0, 5.0, 1.5, 2.0), LShapeCorner.TOP_RIGHT
        )

        assert walls[0].name == "North (left)"
        assert walls[1].name == "North (right)"
        assert walls[0].end == Point2D(5.0, 0.0)
        assert walls[1].length == 2.0

    def test_extension_wider_than_main(self) -> None:
        """An extension deeper than the main rectangle still closes the loop."""
        walls = resolve_walls(
            RoomShape.L_SHAPE, _l_dimensions(2.0, 3.0, 4.0, 2.0), LShapeCorner.BOTTOM_RIGHT
        )

        assert len(walls) == 7
        assert walls[-1].end == walls[0].start

    def test_missing_corner_raises(self) -> None:
        """L-shapes need a corner."""
        with pytest.raises(InvalidGeometry, match="corner"):
            resolve_walls(RoomShape.L_SHAPE, _l_dimensions())

    def test_unknown_corner_raises(self) -> None:
        """Unknown corner values are rejected."""
        with pytest.raises(InvalidGeometry, match="Unknown L-shape corner"):
            resolve_walls(RoomShape.L_SHAPE, _l_dimensions(), "middle")

    def test_missing_extension_raises(self) -> None:
        """L-shapes need both extension dimensions."""
        with pytest.raises(InvalidGeometry, match="secondary"):
            resolve_walls(RoomShape.L_SHAPE, RECTANGLE, LShapeCorner.TOP_LEFT)

    def test_degenerate_extension_raises(self) -> None:
        """An extension as wide as the main rectangle is not an L-shape."""
        with pytest.raises(InvalidGeometry, match="rectangle instead"):
            resolve_walls(
                RoomShape.L_SHAPE, _l_dimensions(4.0, 4.0, 4.0, 2.0), LShapeCorner.TOP_RIGHT
            )

    def test_unknown_shape_raises(self) -> None:
        """Unknown shapes are rejected."""
        with pytest.raises(InvalidGeometry, match="Unknown room shape"):
            resolve_walls("circle", RECTANGLE)


class TestAreaAndPerimeter:
    """Tests for floor area and perimeter."""

    def test_rectangle_floor_area(self) -> None:
        assert compute_floor_area(RoomShape.RECTANGLE, RECTANGLE) == 12.0

    def test_rectangle_perimeter(self) -> None:
        assert compute_perimeter(RoomShape.RECTANGLE, RECTANGLE) == 14.0

    def test_l_shape_floor_area_adds_extension(self) -> None:
        """Main 4x4 plus extension 2x2 is 20 m²."""
        assert compute_floor_area(RoomShape.L_SHAPE, _l_dimensions()) == 20.0

    def test_l_shape_perimeter_is_corner_independent(self) -> None:
        """Every corner yields the same perimeter."""
        dimensions = _l_dimensions(3.0, 5.0, 1.5, 2.0)
        perimeters = {
            round(compute_perimeter(RoomShape.L_SHAPE, dimensions, corner), 9)
            for corner in LShapeCorner
        }

        assert len(perimeters) == 1

    def test_bottom_left_matches_top_right(self) -> None:
        """Perimeter is unchanged when the corner moves from bottom left to top right."""
        dimensions = _l_dimensions()

        assert compute_perimeter(
            RoomShape.L_SHAPE, dimensions, LShapeCorner.BOTTOM_LEFT
        ) == compute_perimeter(RoomShape.L_SHAPE, dimensions, LShapeCorner.TOP_RIGHT)

    @pytest.mark.parametrize(
        ("shape", "dimensions", "corner"),
        [
            (RoomShape.RECTANGLE, RECTANGLE, None),
            (RoomShape.L_SHAPE, _l_dimensions(), LShapeCorner.BOTTOM_LEFT),
            (RoomShape.L_SHAPE, _l_dimensions(3.0, 5.0, 1.5, 2.0), LShapeCorner.TOP_LEFT),
        ],
    )
    def test_wall_lengths_sum_to_perimeter(
        self,
        shape: RoomShape,
        dimensions: RoomDimensions,
        corner: LShapeCorner | None,
    ) -> None:
        """Sum of wall lengths equals the perimeter."""
        walls = resolve_walls(shape, dimensions, corner)

        assert sum(w.length for w in walls) == pytest.approx(
            compute_perimeter(shape, dimensions, corner)
        )

    def test_l_shape_area_without_extension_raises(self) -> None:
        with pytest.raises(InvalidGeometry):
            compute_floor_area(RoomShape.L_SHAPE, RECTANGLE)


class TestOpenings:
    """Tests for binding openings to walls."""

    @pytest.fixture
    def walls(self, rectangle_geometry: RoomGeometry) -> list:
        return resolve_room_walls(rectangle_geometry)

    def test_find_wall(self, walls: list) -> None:
        assert find_wall(walls, 2).name == "Bottom"

    def test_find_unknown_wall_raises(self, walls: list) -> None:
        with pytest.raises(InvalidGeometry, match="Wall 4 does not exist"):
            find_wall(walls, 4)

    def test_validate_openings_accepts_bound_openings(
        self, walls: list, door_and_window: list[Opening]
    ) -> None:
        validate_openings(walls, door_and_window)

    def test_opening_on_l_shape_wall_id_rejected_for_rectangle(self, walls: list) -> None:
        """Wall 6 exists for L-shapes only."""
        opening = Opening(
            type=OpeningType.WINDOW, width=Meters(1.0), height=Meters(1.0), wall_id=6
        )

        with pytest.raises(InvalidGeometry):
            validate_openings(walls, [opening])

    def test_opening_starting_at_wall_end_rejected(self, walls: list) -> None:
        """Positions must lie within [0, wall length)."""
        opening = Opening(
            type=OpeningType.DOOR,
            width=Meters(0.9),
            height=Meters(2.0),
            wall_id=1,
            position_along_wall=Meters(3.0),
        )

        with pytest.raises(InvalidGeometry, match="outside wall 1"):
            validate_openings(walls, [opening])

    def test_place_opening_on_horizontal_wall(self, walls: list) -> None:
        opening = Opening(
            type=OpeningType.DOOR,
            width=Meters(0.9),
            height=Meters(2.0),
            wall_id=0,
            position_along_wall=Meters(1.0),
        )

        placement = place_opening(walls[0], opening)

        assert placement.start == Point2D(1.0, 0.0)
        assert placement.end.x == pytest.approx(1.9)
        assert placement.end.y == 0.0
        assert placement.rotation == 0

    def test_place_opening_on_vertical_wall(self, walls: list) -> None:
        opening = Opening(
            type=OpeningType.WINDOW,
            width=Meters(1.0),
            height=Meters(1.2),
            wall_id=1,
            position_along_wall=Meters(0.5),
        )

        placement = place_opening(walls[1], opening)

        assert placement.start == Point2D(4.0, 0.5)
        assert placement.end == Point2D(4.0, 1.5)
        assert placement.rotation == 90

    def test_opening_fits(self, walls: list, door_and_window: list[Opening]) -> None:
        assert check_opening_fits(walls[0], door_and_window[0]).valid

    def test_opening_wider_than_wall(self, walls: list) -> None:
        opening = Opening(
            type=OpeningType.WINDOW, width=Meters(3.5), height=Meters(1.0), wall_id=1
        )

        result = check_opening_fits(walls[1], opening)

        assert not result.valid
        assert "wider than wall" in result.message

    def test_opening_running_past_wall_end(self, walls: list) -> None:
        opening = Opening(
            type=OpeningType.WINDOW,
            width=Meters(1.5),
            height=Meters(1.0),
            wall_id=1,
            position_along_wall=Meters(2.0),
        )

        result = check_opening_fits(walls[1], opening)

        assert not result.valid
        assert "does not fit" in result.message


class TestPositionFromPercent:
    """Tests for converting centre percentages to near-edge positions."""

    @pytest.fixture
    def wall(self, rectangle_geometry: RoomGeometry):
        return resolve_room_walls(rectangle_geometry)[0]

    def test_centre(self, wall) -> None:
        """50% of a 4 m wall centres a 1 m opening at 2 m."""
        assert position_from_percent(wall, 50, 1.0) == pytest.approx(1.5)

    def test_snaps_to_wall_start(self, wall) -> None:
        assert position_from_percent(wall, 0, 1.0) == 0.0

    def test_snaps_to_wall_end(self, wall) -> None:
        assert position_from_percent(wall, 100, 1.0) == pytest.approx(3.0)

    def test_out_of_range_raises(self, wall) -> None:
        with pytest.raises(InvalidGeometry, match="between 0 and 100"):
            position_from_percent(wall, 120, 1.0)
