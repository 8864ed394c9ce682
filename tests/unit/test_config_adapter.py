"""Unit tests for converting configurations into domain objects.

These tests verify:
- Centimeter configurations are converted to meters once
- Rectangles drop extension fields
- Openings are bound to walls by position or percent
- Options map onto EstimateOptions
"""

from pathlib import Path

import pytest

from renobudget.application.config import (
    RoomConfig,
    config_to_geometry,
    config_to_options,
    config_to_room,
    load_config,
    load_config_from_dict,
)
from renobudget.application.config.schemas import OptionsConfig
from renobudget.domain.exceptions import InvalidGeometry
from renobudget.domain.value_objects import (
    EstimateOptions,
    LShapeCorner,
    OpeningType,
    RoomShape,
)


class TestConfigToGeometry:
    """Tests for config_to_geometry."""

    def test_meters_pass_through(self) -> None:
        geometry = config_to_geometry(RoomConfig(main_width=3.0, main_length=4.0, height=2.5))

        assert geometry.shape == RoomShape.RECTANGLE
        assert geometry.dimensions.main_width == 3.0
        assert geometry.dimensions.main_length == 4.0
        assert geometry.height == 2.5

    def test_centimeters_are_converted(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_l_shape_cm.json")

        geometry = config_to_geometry(config.room)

        assert geometry.shape == RoomShape.L_SHAPE
        assert geometry.corner == LShapeCorner.BOTTOM_LEFT
        assert geometry.dimensions.main_width == 4.0
        assert geometry.dimensions.secondary_length == 2.0
        assert geometry.height == 2.5

    def test_rectangle_drops_extension(self) -> None:
        room = RoomConfig(
            main_width=3.0,
            main_length=4.0,
            height=2.5,
            secondary_width=1.0,
            secondary_length=1.0,
            corner="top_left",
        )

        geometry = config_to_geometry(room)

        assert geometry.corner is None
        assert not geometry.dimensions.has_extension


class TestConfigToRoom:
    """Tests for config_to_room."""

    def test_openings_by_position(self, fixtures_path: Path) -> None:
        room = config_to_room(load_config(fixtures_path / "valid_rectangle.json"))

        assert room.name == "Living room"
        door, window = room.openings
        assert door.type == OpeningType.DOOR
        assert door.wall_id == 0
        assert door.position_along_wall == 0.5
        assert window.width == 1.5

    def test_opening_by_percent_in_centimeters(self, fixtures_path: Path) -> None:
        """A 90 cm door centred on the 4 m north wall starts at 1.55 m."""
        room = config_to_room(load_config(fixtures_path / "valid_l_shape_cm.json"))

        (door,) = room.openings
        assert door.width == pytest.approx(0.9)
        assert door.height == pytest.approx(2.0)
        assert door.position_along_wall == pytest.approx(1.55)

    def test_opening_without_position_starts_at_wall_start(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "room": {
                    "main_width": 3,
                    "main_length": 4,
                    "height": 2.5,
                    "openings": [{"type": "window", "wall": 2, "width": 1, "height": 1}],
                },
            }
        )

        assert config_to_room(config).openings[0].position_along_wall == 0.0

    def test_percent_on_unknown_wall_raises(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "room": {
                    "main_width": 3,
                    "main_length": 4,
                    "height": 2.5,
                    "openings": [
                        {"type": "window", "wall": 5, "width": 1, "height": 1, "position_percent": 50}
                    ],
                },
            }
        )

        with pytest.raises(InvalidGeometry, match="Wall 5"):
            config_to_room(config)

    def test_degenerate_l_shape_raises(self, fixtures_path: Path) -> None:
        with pytest.raises(InvalidGeometry):
            config_to_room(load_config(fixtures_path / "degenerate_l_shape.json"))


class TestConfigToOptions:
    """Tests for config_to_options."""

    def test_maps_every_field(self) -> None:
        options = config_to_options(
            OptionsConfig(
                use_osb_floor=True, use_suspended_ceiling=True, socket_count=6, switch_count=2
            )
        )

        assert options == EstimateOptions(
            use_osb_floor=True, use_suspended_ceiling=True, socket_count=6, switch_count=2
        )
