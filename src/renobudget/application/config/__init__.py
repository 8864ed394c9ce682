"""Configuration schema and loading system for room estimates.

This package provides JSON-based configuration loading and validation for
room estimates: Pydantic models for schema validation, a loader with error
handling, an adapter to domain objects and advisory checks.

Example:
    >>> from pathlib import Path
    >>> from renobudget.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"Room: {config.room.main_length}x{config.room.main_width}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from renobudget.application.config.adapter import (
    config_to_geometry,
    config_to_opening,
    config_to_openings,
    config_to_options,
    config_to_room,
)
from renobudget.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from renobudget.application.config.merger import merge_config_with_cli
from renobudget.application.config.schemas import (
    SUPPORTED_VERSIONS,
    EstimateConfiguration,
    LengthUnit,
    OpeningConfig,
    OptionsConfig,
    PricingConfig,
    RoomConfig,
)
from renobudget.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_estimate_advisories,
    check_room_geometry,
    validate_config,
)

__all__ = [
    "ConfigError",
    "EstimateConfiguration",
    "LengthUnit",
    "OpeningConfig",
    "OptionsConfig",
    "PricingConfig",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_estimate_advisories",
    "check_room_geometry",
    "config_to_geometry",
    "config_to_opening",
    "config_to_openings",
    "config_to_options",
    "config_to_room",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
