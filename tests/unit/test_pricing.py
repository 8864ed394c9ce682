"""Unit tests for price tier selection and price table resolution."""

import logging

import pytest

from renobudget.application.pricing import (
    MATERIAL_CODE_MAPPING,
    PricingTier,
    resolve_price_table,
    select_tier_prices,
)
from renobudget.domain.value_objects import MaterialKey


def _row(code: str, budget=None, mid_range=None, premium=None, nested: bool = True) -> dict:
    row = {"budget_price": budget, "mid_range_price": mid_range, "premium_price": premium}
    if nested:
        row["materials"] = {"code": code, "name_pl": code}
    else:
        row["code"] = code
    return row


class TestPricingTier:
    """Tests for PricingTier."""

    def test_price_column(self) -> None:
        assert PricingTier.MID_RANGE.price_column == "mid_range_price"

    def test_every_material_has_a_code(self) -> None:
        assert set(MATERIAL_CODE_MAPPING.values()) == set(MaterialKey)


class TestSelectTierPrices:
    """Tests for select_tier_prices."""

    def test_selects_requested_tier(self) -> None:
        rows = [_row("floor_panels", 35, 45, 80), _row("cable_1.5", 3, 5, 8)]

        assert select_tier_prices(rows, PricingTier.BUDGET) == {
            "floorPanels": 35.0,
            "cable15": 3.0,
        }

    def test_tier_as_string(self) -> None:
        assert select_tier_prices([_row("paint", 40, 60, 90)], "premium") == {"paint": 90.0}

    def test_falls_back_to_mid_range(self) -> None:
        rows = [_row("paint", budget=40, mid_range=60)]

        assert select_tier_prices(rows, PricingTier.PREMIUM) == {"paint": 60.0}

    def test_falls_back_to_budget_without_mid_range(self) -> None:
        rows = [_row("paint", budget=40, premium=90)]

        assert select_tier_prices(rows, PricingTier.MID_RANGE) == {"paint": 40.0}

    def test_row_without_prices_is_skipped(self) -> None:
        assert select_tier_prices([_row("paint")], PricingTier.BUDGET) == {}

    def test_row_without_code_is_skipped(self) -> None:
        rows = [{"budget_price": 10, "materials": None}]

        assert select_tier_prices(rows, PricingTier.BUDGET) == {}

    def test_flat_code_column(self) -> None:
        rows = [_row("socket", 20, 25, 40, nested=False)]

        assert select_tier_prices(rows, PricingTier.MID_RANGE) == {"sockets": 25.0}

    def test_relation_as_list(self) -> None:
        rows = [{"mid_range_price": 12, "materials": [{"code": "hanger"}]}]

        assert select_tier_prices(rows) == {"hangers": 12.0}

    def test_unmapped_code_passes_through(self) -> None:
        rows = [_row("grout", 10, 12, 15)]

        assert select_tier_prices(rows) == {"grout": 12.0}

    def test_unknown_tier_raises(self) -> None:
        with pytest.raises(ValueError):
            select_tier_prices([], "luxury")


class TestResolvePriceTable:
    """Tests for resolve_price_table."""

    def test_defaults_only(self) -> None:
        table = resolve_price_table()

        assert table.get(MaterialKey.FLOOR_PANELS) == 45.0
        assert len(table) == len(MaterialKey)

    def test_tier_prices_replace_defaults(self) -> None:
        table = resolve_price_table({"floorPanels": 35.0})

        assert table.get(MaterialKey.FLOOR_PANELS) == 35.0
        assert table.get(MaterialKey.PAINT) == 60.0

    def test_overrides_win_over_tier_prices(self) -> None:
        table = resolve_price_table({"floorPanels": 35.0}, {"floorPanels": 50.0})

        assert table.get(MaterialKey.FLOOR_PANELS) == 50.0

    def test_overrides_accept_material_keys(self) -> None:
        table = resolve_price_table(overrides={MaterialKey.PAINT: 70.0})

        assert table.get(MaterialKey.PAINT) == 70.0

    def test_unknown_keys_are_reported(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="renobudget.application.pricing"):
            table = resolve_price_table({"grout": 12.0})

        assert table.ignored_keys == ("grout",)
        assert "grout" in caplog.text
