"""Pytest configuration and shared fixtures for estimator tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from renobudget.application.factory import reset_factory
from renobudget.domain.entities import Opening, RoomGeometry
from renobudget.domain.value_objects import (
    LShapeCorner,
    Meters,
    OpeningType,
    RoomDimensions,
    RoomShape,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or the REST API"
    )


@pytest.fixture(autouse=True)
def fresh_factory(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test its own service factory and no price source."""
    monkeypatch.delenv("RENOBUDGET_PRICES_URL", raising=False)
    monkeypatch.delenv("RENOBUDGET_PRICES_KEY", raising=False)
    reset_factory()
    yield
    reset_factory()


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def rectangle_geometry() -> RoomGeometry:
    """4 m x 3 m room with 2.5 m walls."""
    return RoomGeometry(
        shape=RoomShape.RECTANGLE,
        dimensions=RoomDimensions(
            main_width=Meters(3.0), main_length=Meters(4.0), height=Meters(2.5)
        ),
    )


@pytest.fixture
def l_shape_geometry() -> RoomGeometry:
    """4 m x 4 m main rectangle with a 2 m x 2 m extension at the bottom left."""
    return RoomGeometry(
        shape=RoomShape.L_SHAPE,
        dimensions=RoomDimensions(
            main_width=Meters(4.0),
            main_length=Meters(4.0),
            height=Meters(2.5),
            secondary_width=Meters(2.0),
            secondary_length=Meters(2.0),
        ),
        corner=LShapeCorner.BOTTOM_LEFT,
    )


@pytest.fixture
def door_and_window() -> list[Opening]:
    """A 0.9 x 2.0 m door on the top wall and a 1.5 x 1.2 m window on the right."""
    return [
        Opening(
            type=OpeningType.DOOR,
            width=Meters(0.9),
            height=Meters(2.0),
            wall_id=0,
            position_along_wall=Meters(0.5),
        ),
        Opening(
            type=OpeningType.WINDOW,
            width=Meters(1.5),
            height=Meters(1.2),
            wall_id=1,
            position_along_wall=Meters(0.5),
        ),
    ]
