"""Configuration merging utilities for CLI override support.

Precedence: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from renobudget.application.config.loader import (
    ConfigError,
    config_error_from_validation,
)
from renobudget.application.config.schemas import (
    EstimateConfiguration,
    OptionsConfig,
    PricingConfig,
)


def merge_config_with_cli(
    config: EstimateConfiguration,
    *,
    use_osb_floor: bool | None = None,
    use_suspended_ceiling: bool | None = None,
    socket_count: int | None = None,
    switch_count: int | None = None,
    tier: str | None = None,
    currency: str | None = None,
) -> EstimateConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base configuration to merge with
        use_osb_floor: Override for options.use_osb_floor
        use_suspended_ceiling: Override for options.use_suspended_ceiling
        socket_count: Override for options.socket_count
        switch_count: Override for options.switch_count
        tier: Override for pricing.tier
        currency: Override for pricing.currency

    Returns:
        A new EstimateConfiguration with merged values.

    Raises:
        ConfigError: If an override breaks the rules a file value must
            follow, e.g. a negative socket count.

    Example:
        >>> config = load_config(Path("kitchen.json"))
        >>> merged = merge_config_with_cli(config, socket_count=6)
        >>> merged.options.socket_count
        6
    """
    options_data = _override(
        config.options.model_dump(),
        use_osb_floor=use_osb_floor,
        use_suspended_ceiling=use_suspended_ceiling,
        socket_count=socket_count,
        switch_count=switch_count,
    )
    pricing_data = _override(
        config.pricing.model_dump(),
        tier=tier,
        currency=currency,
    )
    try:
        return EstimateConfiguration(
            schema_version=config.schema_version,
            room=config.room,
            options=OptionsConfig.model_validate(options_data),
            pricing=PricingConfig.model_validate(pricing_data),
        )
    except PydanticValidationError as e:
        raise config_error_from_validation(e) from e


def _override(data: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    merged = dict(data)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged
