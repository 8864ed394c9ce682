"""Unit tests for configuration validation and advisories."""

from pathlib import Path

import pytest

from renobudget.application.config import (
    ValidationResult,
    check_estimate_advisories,
    check_room_geometry,
    load_config,
    load_config_from_dict,
    validate_config,
)


def _config(room: dict, options: dict | None = None):
    return load_config_from_dict(
        {
            "schema_version": "1.0",
            "room": {"main_width": 3.0, "main_length": 4.0, "height": 2.5, **room},
            "options": options if options is not None else {"socket_count": 2, "switch_count": 1},
        }
    )


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_empty_result_is_valid(self) -> None:
        result = ValidationResult()

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("options", "No sockets")

        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code_wins(self) -> None:
        result = ValidationResult().add_warning("a", "warn").add_error("b", "err")

        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "err")
        result.merge(ValidationResult().add_warning("b", "warn"))

        assert len(result.errors) == 1
        assert len(result.warnings) == 1


class TestCheckRoomGeometry:
    """Tests for geometry checks."""

    def test_valid_room(self, fixtures_path: Path) -> None:
        result = check_room_geometry(load_config(fixtures_path / "valid_rectangle.json"))

        assert result.is_valid
        assert not result.has_warnings

    def test_degenerate_l_shape_is_error(self, fixtures_path: Path) -> None:
        result = check_room_geometry(load_config(fixtures_path / "degenerate_l_shape.json"))

        assert not result.is_valid
        assert result.errors[0].path == "room"

    def test_unknown_wall_is_error(self) -> None:
        config = _config({"openings": [{"type": "door", "wall": 4, "width": 0.9, "height": 2.0}]})

        result = check_room_geometry(config)

        assert result.errors[0].path == "room.openings[0].wall"
        assert result.errors[0].value == 4

    def test_position_past_wall_end_is_error(self) -> None:
        config = _config(
            {"openings": [{"type": "window", "wall": 1, "width": 1.0, "height": 1.0, "position": 3.0}]}
        )

        result = check_room_geometry(config)

        assert result.errors[0].path == "room.openings[0].position"

    def test_opening_running_past_wall_is_warning(self, fixtures_path: Path) -> None:
        result = check_room_geometry(load_config(fixtures_path / "opening_not_fitting.json"))

        assert result.is_valid
        assert result.warnings[0].path == "room.openings[0]"
        assert "does not fit" in result.warnings[0].message

    def test_openings_larger_than_walls_is_error(self) -> None:
        config = _config(
            {
                "main_width": 2.0,
                "main_length": 2.0,
                "height": 1.0,
                "openings": [
                    {"type": "window", "wall": i, "width": 1.9, "height": 3.0} for i in range(4)
                ],
            }
        )

        result = check_room_geometry(config)

        assert result.errors[0].path == "room.openings"

    def test_openings_covering_most_walls_is_warning(self) -> None:
        """Openings over 80% of the 14 m² of wall area are flagged."""
        config = _config(
            {
                "main_width": 1.5,
                "main_length": 2.0,
                "height": 2.0,
                "openings": [
                    {"type": "window", "wall": 0, "width": 2.0, "height": 2.0},
                    {"type": "window", "wall": 1, "width": 1.5, "height": 2.0},
                    {"type": "window", "wall": 2, "width": 2.0, "height": 2.0},
                    {"type": "window", "wall": 3, "width": 1.0, "height": 2.0},
                ],
            }
        )

        result = check_room_geometry(config)

        assert result.is_valid
        assert [w.path for w in result.warnings] == ["room.openings"]


class TestCheckEstimateAdvisories:
    """Tests for option advisories."""

    def test_no_electrical_points(self) -> None:
        result = check_estimate_advisories(_config({}, options={}))

        assert [w.path for w in result.warnings] == ["options"]

    def test_rectangle_with_extension_fields(self) -> None:
        result = check_estimate_advisories(
            _config({"secondary_width": 1.0, "secondary_length": 1.0})
        )

        assert [w.path for w in result.warnings] == ["room"]

    def test_no_advisories(self) -> None:
        assert not check_estimate_advisories(_config({})).has_warnings


class TestValidateConfig:
    """Tests for the combined validation."""

    @pytest.mark.parametrize(
        ("fixture", "exit_code"),
        [
            ("valid_rectangle.json", 0),
            ("valid_l_shape_cm.json", 0),
            ("opening_not_fitting.json", 2),
            ("degenerate_l_shape.json", 1),
        ],
    )
    def test_exit_codes(self, fixtures_path: Path, fixture: str, exit_code: int) -> None:
        result = validate_config(load_config(fixtures_path / fixture))

        assert result.exit_code == exit_code
