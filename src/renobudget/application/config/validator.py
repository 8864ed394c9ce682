"""Validation structures and estimate advisory checks.

Schema validation already ran when the configuration was loaded. The checks
here need the resolved room outline: they report as errors everything the
calculator would reject and as warnings inputs that are accepted but
probably wrong.
"""

from dataclasses import dataclass, field
from typing import Any

from renobudget.application.config.adapter import (
    config_to_geometry,
    config_to_opening,
)
from renobudget.application.config.schemas import EstimateConfiguration
from renobudget.domain.entities import Opening
from renobudget.domain.exceptions import EstimationError
from renobudget.domain.services.geometry import (
    check_opening_fits,
    find_wall,
    resolve_room_walls,
)
from renobudget.domain.services.material_calculator import measure_room
from renobudget.domain.value_objects import RoomShape

# Share of the gross wall area above which openings look suspicious.
OPENING_AREA_WARNING_RATIO = 0.8


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "room.openings[0].wall")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_room_geometry(config: EstimateConfiguration) -> ValidationResult:
    """Check the room outline and every opening against the resolved walls.

    Errors:
    - Dimensions that cannot form the outline (e.g. a degenerate L-shape)
    - Openings on walls the room does not have or starting past the wall end
    - Openings whose total area exceeds the gross wall area

    Warnings:
    - Openings that run past the end of their wall
    - Openings covering most of the wall area
    """
    result = ValidationResult()
    room = config.room

    try:
        geometry = config_to_geometry(room)
        walls = resolve_room_walls(geometry)
    except EstimationError as e:
        return result.add_error("room", str(e))

    openings: list[Opening] = []
    for i, opening_config in enumerate(room.openings):
        path = f"room.openings[{i}]"
        try:
            wall = find_wall(walls, opening_config.wall)
            opening = config_to_opening(opening_config, room.unit, walls)
        except EstimationError as e:
            result.add_error(f"{path}.wall", str(e), opening_config.wall)
            continue

        if opening.position_along_wall >= wall.length:
            result.add_error(
                f"{path}.position",
                f"Opening starts beyond the end of wall {wall.id} "
                f"({wall.name}, {wall.length:.2f} m)",
                opening_config.position,
            )
            continue

        fit = check_opening_fits(wall, opening)
        if not fit.valid:
            result.add_warning(
                path=path,
                message=fit.message or "Opening does not fit its wall",
                suggestion="Move the opening or reduce its width",
            )
        openings.append(opening)

    if not result.is_valid:
        return result

    try:
        measurements = measure_room(geometry, openings)
    except EstimationError as e:
        return result.add_error("room.openings", str(e))

    opening_area = measurements.door_area + measurements.window_area
    if opening_area > measurements.gross_wall_area * OPENING_AREA_WARNING_RATIO:
        result.add_warning(
            path="room.openings",
            message=(
                f"Openings cover {opening_area:.2f} m² of "
                f"{measurements.gross_wall_area:.2f} m² wall area"
            ),
            suggestion="Check opening sizes and units",
        )

    return result


def check_estimate_advisories(config: EstimateConfiguration) -> ValidationResult:
    """Advisory checks on options that are valid but likely unintended."""
    result = ValidationResult()
    room = config.room
    options = config.options

    if options.socket_count == 0 and options.switch_count == 0:
        result.add_warning(
            path="options",
            message="No sockets or switches: electrical materials will be empty",
            suggestion="Set socket_count and switch_count",
        )

    if room.shape == RoomShape.RECTANGLE and (
        room.secondary_width is not None
        or room.secondary_length is not None
        or room.corner is not None
    ):
        result.add_warning(
            path="room",
            message="Secondary dimensions and corner are ignored for rectangular rooms",
            suggestion="Set shape to 'l_shape' or remove the extension fields",
        )

    return result


def validate_config(config: EstimateConfiguration) -> ValidationResult:
    """Perform full validation of a room estimate configuration.

    Args:
        config: An EstimateConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_room_geometry(config))
    result.merge(check_estimate_advisories(config))
    return result
