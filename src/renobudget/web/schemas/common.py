"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    """Point in plan coordinates, meters."""

    x: float = Field(..., description="East coordinate in meters")
    y: float = Field(..., description="South coordinate in meters")


class WallSchema(BaseModel):
    """Resolved wall of a room."""

    id: int = Field(..., description="Wall id referenced by openings")
    name: str = Field(..., description="Wall label")
    length: float = Field(..., description="Wall length in meters")
    direction: str = Field(..., description="horizontal or vertical")
    start: PointSchema = Field(..., description="Wall start point")
    end: PointSchema = Field(..., description="Wall end point")


class MeasurementsSchema(BaseModel):
    """Derived room measurements."""

    floor_area: float = Field(..., description="Floor area in m²")
    perimeter: float = Field(..., description="Perimeter in meters")
    gross_wall_area: float = Field(..., description="Wall area before openings in m²")
    net_wall_area: float = Field(..., description="Wall area after openings in m²")
