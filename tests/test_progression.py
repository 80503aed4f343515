"""Tests for dessertclicker.core.progression – active item and level arithmetic."""

from __future__ import annotations

import pytest

from dessertclicker.core.catalog import Catalog, CatalogItem, default_catalog
from dessertclicker.core.progression import (
    ProgressionState,
    advance_on_click,
    level_threshold,
    progress_fraction,
    select_active_index,
    select_active_item,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def two_items() -> Catalog:
    return Catalog(
        [
            CatalogItem("Cupcake", 5, "cupcake", 0),
            CatalogItem("Donut", 8, "donut", 3),
        ]
    )


@pytest.fixture()
def three_tiers() -> Catalog:
    return Catalog(
        [
            CatalogItem("Cupcake", 5, "cupcake", 0),
            CatalogItem("Donut", 10, "donut", 5),
            CatalogItem("Eclair", 15, "eclair", 10),
        ]
    )


def _click(state: ProgressionState, catalog: Catalog, times: int) -> ProgressionState:
    for _ in range(times):
        state = advance_on_click(state, catalog)
    return state


# ---------------------------------------------------------------------------
# ProgressionState
# ---------------------------------------------------------------------------

class TestProgressionState:
    def test_initial(self):
        state = ProgressionState.initial()
        assert state.total_sold == 0
        assert state.total_revenue == 0
        assert state.level == 1
        assert state.active_index == 0
        assert state.progress == 0.0

    def test_frozen(self):
        state = ProgressionState.initial()
        with pytest.raises(AttributeError):
            state.total_sold = 3  # type: ignore[misc]

    def test_level_zero_rejected(self):
        with pytest.raises(ValueError, match="level must be at least 1"):
            ProgressionState(level=0)

    def test_negative_sold_rejected(self):
        with pytest.raises(ValueError, match="total_sold"):
            ProgressionState(total_sold=-1)

    def test_negative_revenue_rejected(self):
        with pytest.raises(ValueError, match="total_revenue"):
            ProgressionState(total_revenue=-5)

    def test_negative_active_index_rejected(self):
        with pytest.raises(ValueError, match="active_index"):
            ProgressionState(active_index=-1)

    @pytest.mark.parametrize("progress", [-0.1, 1.0, 1.5])
    def test_progress_out_of_range_rejected(self, progress: float):
        with pytest.raises(ValueError, match="progress"):
            ProgressionState(progress=progress)

    def test_valid_mid_game_state(self):
        state = ProgressionState(total_sold=15, total_revenue=100, level=2, active_index=2, progress=0.75)
        assert state.level == 2

    def test_active_item_follows_total_sold(self, three_tiers: Catalog):
        # A stale index does not change which item is selected.
        state = ProgressionState(total_sold=0, active_index=2)
        assert select_active_item(three_tiers, state.total_sold).name == "Cupcake"


# ---------------------------------------------------------------------------
# select_active_item
# ---------------------------------------------------------------------------

class TestSelectActiveItem:
    def test_below_second_threshold(self, two_items: Catalog):
        assert select_active_item(two_items, 2).activation_threshold == 0

    def test_exactly_on_threshold(self, two_items: Catalog):
        assert select_active_item(two_items, 3).activation_threshold == 3

    def test_zero_sold(self, two_items: Catalog):
        assert select_active_item(two_items, 0) is two_items.first()

    def test_beyond_last_threshold(self, three_tiers: Catalog):
        assert select_active_item(three_tiers, 1000).name == "Eclair"

    def test_single_item_catalog(self):
        catalog = Catalog([CatalogItem("Cupcake", 5, "cupcake", 0)])
        assert select_active_item(catalog, 50).name == "Cupcake"

    def test_largest_threshold_not_exceeding(self):
        catalog = default_catalog()
        for sold in range(0, 25000, 37):
            expected = max(
                (item for item in catalog if item.activation_threshold <= sold),
                key=lambda item: item.activation_threshold,
            )
            assert select_active_item(catalog, sold) == expected

    def test_monotonic(self):
        catalog = default_catalog()
        indexes = [select_active_index(catalog, sold) for sold in range(0, 21000, 50)]
        assert indexes == sorted(indexes)

    def test_equal_thresholds_pick_last(self):
        catalog = Catalog(
            [
                CatalogItem("A", 5, "a", 0),
                CatalogItem("B", 6, "b", 4),
                CatalogItem("C", 7, "c", 4),
            ]
        )
        assert select_active_item(catalog, 4).name == "C"

    def test_negative_sold_rejected(self, two_items: Catalog):
        with pytest.raises(ValueError, match="non-negative"):
            select_active_item(two_items, -1)


# ---------------------------------------------------------------------------
# level_threshold / progress_fraction
# ---------------------------------------------------------------------------

class TestLevelArithmetic:
    def test_threshold(self):
        assert level_threshold(1) == 10
        assert level_threshold(4) == 40

    def test_fraction_within_level(self):
        assert progress_fraction(3, 1) == pytest.approx(0.3)

    def test_fraction_wraps_on_threshold(self):
        assert progress_fraction(10, 1) == 0.0

    def test_fraction_at_higher_level(self):
        assert progress_fraction(15, 2) == pytest.approx(0.75)

    def test_click_progress_matches_fraction_of_previous_level(self, three_tiers: Catalog):
        state = ProgressionState.initial()
        for _ in range(35):
            after = advance_on_click(state, three_tiers)
            assert after.progress == progress_fraction(after.total_sold, state.level)
            state = after


# ---------------------------------------------------------------------------
# advance_on_click
# ---------------------------------------------------------------------------

class TestAdvanceOnClick:
    def test_increments_sold_by_one(self, three_tiers: Catalog):
        state = advance_on_click(ProgressionState.initial(), three_tiers)
        assert state.total_sold == 1

    def test_does_not_mutate_input(self, three_tiers: Catalog):
        before = ProgressionState.initial()
        advance_on_click(before, three_tiers)
        assert before == ProgressionState.initial()

    def test_revenue_accumulates(self):
        catalog = Catalog([CatalogItem("Cupcake", 5, "cupcake", 0)])
        state = _click(ProgressionState.initial(), catalog, 3)
        assert state.total_revenue == 15
        assert state.total_sold == 3

    def test_priced_at_item_active_before_click(self, two_items: Catalog):
        # Clicks 1-3 are sold as cupcakes; the donut only appears once 3 are sold.
        state = _click(ProgressionState.initial(), two_items, 3)
        assert state.total_revenue == 15
        assert state.active_index == 1
        state = advance_on_click(state, two_items)
        assert state.total_revenue == 23

    def test_revenue_step_matches_active_item(self):
        catalog = default_catalog()
        state = ProgressionState.initial()
        for _ in range(120):
            price = select_active_item(catalog, state.total_sold).unit_price
            after = advance_on_click(state, catalog)
            assert after.total_revenue - state.total_revenue == price
            assert after.total_sold - state.total_sold == 1
            state = after

    def test_level_up_after_ten_clicks(self, three_tiers: Catalog):
        state = _click(ProgressionState.initial(), three_tiers, 10)
        assert state.level == 2
        assert three_tiers[state.active_index].activation_threshold == 10

    def test_no_level_up_before_threshold(self, three_tiers: Catalog):
        state = _click(ProgressionState.initial(), three_tiers, 9)
        assert state.level == 1
        assert state.progress == pytest.approx(0.9)

    def test_progress_resets_on_rollover_click(self, three_tiers: Catalog):
        state = _click(ProgressionState.initial(), three_tiers, 9)
        state = advance_on_click(state, three_tiers)
        assert state.total_sold == 10
        assert state.level == 2
        assert state.progress == 0.0

    def test_progress_after_rollover_uses_new_level(self, three_tiers: Catalog):
        state = _click(ProgressionState.initial(), three_tiers, 11)
        assert state.level == 2
        assert state.progress == pytest.approx(11 / 20)

    def test_second_level_up_at_twenty(self, three_tiers: Catalog):
        state = _click(ProgressionState.initial(), three_tiers, 19)
        assert state.level == 2
        state = advance_on_click(state, three_tiers)
        assert state.level == 3
        assert state.progress == 0.0

    def test_level_never_decreases(self):
        catalog = default_catalog()
        state = ProgressionState.initial()
        for _ in range(200):
            after = advance_on_click(state, catalog)
            assert after.level >= state.level
            assert after.active_index >= state.active_index
            state = after
