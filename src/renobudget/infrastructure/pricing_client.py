"""PostgREST price source.

Reads tiered material prices from a PostgREST endpoint such as a Supabase
project. Each row of ``material_prices`` carries a price per tier and the
material code through the ``materials`` relation.

Classes:
    PostgrestPriceSource: Async client returning flattened tier prices
    PriceSourceError: Raised when prices cannot be fetched
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

import httpx

from renobudget.application.pricing import (
    PricingTier,
    resolve_price_table,
    select_tier_prices,
)
from renobudget.domain.services.cost_aggregator import PriceTable

logger = logging.getLogger(__name__)

PRICES_URL_ENV = "RENOBUDGET_PRICES_URL"
PRICES_KEY_ENV = "RENOBUDGET_PRICES_KEY"

PRICE_SELECT = "budget_price,mid_range_price,premium_price,materials!inner(code,name_pl)"


class PriceSourceError(Exception):
    """Raised when a price source is unreachable or returns unusable data.

    Attributes:
        message: Human-readable description
        status_code: HTTP status of the failed response, if any
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class PostgrestPriceSource:
    """Fetch tier prices from a PostgREST ``material_prices`` table.

    Attributes:
        base_url: Project URL, without the ``/rest/v1`` suffix
        api_key: Anonymous API key sent as ``apikey`` and bearer token
        timeout: Request timeout in seconds

    Example:
        >>> source = PostgrestPriceSource("https://example.supabase.co", "anon-key")
        >>> prices = await source.fetch_tier_prices("premium")
    """

    TABLE = "material_prices"

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> PostgrestPriceSource | None:
        """Create a source from environment variables, if configured."""
        base_url = os.environ.get(PRICES_URL_ENV)
        if not base_url:
            return None
        return cls(base_url=base_url, api_key=os.environ.get(PRICES_KEY_ENV))

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.TABLE}"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def fetch_rows(self) -> list[dict[str, Any]]:
        """Fetch raw price rows.

        Raises:
            PriceSourceError: On connection errors, timeouts, non-200
                responses or a body that is not a JSON list.
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.endpoint,
                    params={"select": PRICE_SELECT},
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.TimeoutException as e:
            raise PriceSourceError(f"Timeout fetching prices from {self.base_url}") from e
        except httpx.RequestError as e:
            raise PriceSourceError(f"Could not fetch prices from {self.base_url}: {e}") from e

        if response.status_code != 200:
            logger.debug(f"Price source returned status {response.status_code}")
            raise PriceSourceError(
                f"Price source returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            rows = response.json()
        except ValueError as e:
            raise PriceSourceError("Price source returned invalid JSON") from e
        if not isinstance(rows, list):
            raise PriceSourceError("Price source did not return a list of rows")

        logger.debug(f"Fetched {len(rows)} price rows from {self.base_url}")
        return rows

    async def fetch_tier_prices(self, tier: PricingTier | str) -> dict[str, float]:
        """Fetch unit prices for ``tier``, keyed by material name."""
        rows = await self.fetch_rows()
        return select_tier_prices(rows, tier)

    async def fetch_price_table(
        self,
        tier: PricingTier | str = PricingTier.MID_RANGE,
        overrides: dict[str, float] | None = None,
    ) -> PriceTable:
        """Fetch prices for ``tier`` and merge them over the catalog defaults."""
        tier_prices = await self.fetch_tier_prices(tier)
        return resolve_price_table(tier_prices, overrides)

    def fetch_price_table_sync(
        self,
        tier: PricingTier | str = PricingTier.MID_RANGE,
        overrides: dict[str, float] | None = None,
    ) -> PriceTable:
        """Synchronous wrapper for fetch_price_table().

        Convenience method for CLI usage where async is not needed.
        """
        return asyncio.run(self.fetch_price_table(tier, overrides))

    def fetch_tier_prices_sync(self, tier: PricingTier | str) -> dict[str, float]:
        """Synchronous wrapper for fetch_tier_prices()."""
        return asyncio.run(self.fetch_tier_prices(tier))
