"""Room geometry configuration schemas.

This module contains the room and opening models. Lengths are expressed in
the room's ``unit`` and converted to meters by the config adapter.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from renobudget.application.config.schemas.base import (
    LengthUnit,
    LShapeCornerConfig,
    OpeningTypeConfig,
    RoomShapeConfig,
)


class OpeningConfig(BaseModel):
    """Configuration for a door or window.

    The opening is placed either by ``position`` (distance from the wall
    start to its near edge) or by ``position_percent`` (its centre, as a
    percentage of the wall length). Without either it starts at the wall
    start.

    Attributes:
        type: door or window
        wall: Wall index the opening is cut into (0-based)
        width: Opening width
        height: Opening height
        position: Distance from wall start to the near edge
        position_percent: Centre of the opening along the wall (0 to 100)
        name: Optional identifier for the opening
    """

    model_config = ConfigDict(extra="forbid")

    type: OpeningTypeConfig
    wall: int = Field(ge=0, description="Wall index")
    width: float = Field(gt=0, description="Opening width")
    height: float = Field(gt=0, description="Opening height")
    position: float | None = Field(
        default=None, ge=0, description="Distance from wall start"
    )
    position_percent: float | None = Field(
        default=None, ge=0, le=100, description="Centre position along the wall"
    )
    name: str | None = None

    @model_validator(mode="after")
    def validate_single_position(self) -> "OpeningConfig":
        """Only one way of placing the opening may be used."""
        if self.position is not None and self.position_percent is not None:
            raise ValueError("Specify either 'position' or 'position_percent', not both")
        return self


class RoomConfig(BaseModel):
    """Configuration for the room being estimated.

    Attributes:
        name: Display name of the room
        shape: rectangle or l_shape
        unit: Unit for every length in this room (m or cm)
        main_width: North-south extent of the main rectangle
        main_length: East-west extent of the main rectangle
        height: Wall height
        secondary_width: North-south extent of the L-shape extension
        secondary_length: East-west extent of the L-shape extension
        corner: Corner the extension occupies (L-shape only)
        openings: Doors and windows
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Room", min_length=1, max_length=100)
    shape: RoomShapeConfig = RoomShapeConfig.RECTANGLE
    unit: LengthUnit = LengthUnit.METERS
    main_width: float = Field(..., gt=0)
    main_length: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    secondary_width: float | None = Field(default=None, gt=0)
    secondary_length: float | None = Field(default=None, gt=0)
    corner: LShapeCornerConfig | None = None
    openings: list[OpeningConfig] = Field(default_factory=list, max_length=50)

    @model_validator(mode="after")
    def validate_l_shape_fields(self) -> "RoomConfig":
        """L-shaped rooms need the extension dimensions and a corner."""
        if self.shape == RoomShapeConfig.L_SHAPE:
            missing = [
                name
                for name in ("secondary_width", "secondary_length", "corner")
                if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(
                    f"L-shaped rooms require: {', '.join(missing)}"
                )
        return self
