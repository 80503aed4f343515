from __future__ import annotations

import logging
from dataclasses import dataclass

from dessertclicker.core.catalog import Catalog, CatalogItem

logger = logging.getLogger(__name__)

LEVEL_STEP = 10


@dataclass(frozen=True)
class ProgressionState:
    """Counters for one play session.

    ``active_index`` is derived from ``total_sold``; only :func:`advance_on_click`
    sets it, and readers that need the item go through :func:`select_active_item`.
    ``progress`` is the within-level fraction computed by the last update.
    """

    total_sold: int = 0
    total_revenue: int = 0
    level: int = 1
    active_index: int = 0
    progress: float = 0.0

    def __post_init__(self) -> None:
        if self.total_sold < 0:
            raise ValueError(f"total_sold must be non-negative, got {self.total_sold}")
        if self.total_revenue < 0:
            raise ValueError(f"total_revenue must be non-negative, got {self.total_revenue}")
        if self.level < 1:
            raise ValueError(f"level must be at least 1, got {self.level}")
        if self.active_index < 0:
            raise ValueError(f"active_index must be non-negative, got {self.active_index}")
        if not 0.0 <= self.progress < 1.0:
            raise ValueError(f"progress must be in [0, 1), got {self.progress}")

    @classmethod
    def initial(cls) -> "ProgressionState":
        return cls()


def level_threshold(level: int) -> int:
    """Cumulative sales needed to leave ``level``."""
    return level * LEVEL_STEP


def progress_fraction(total_sold: int, level: int) -> float:
    """Position of ``total_sold`` within the ``level`` window, in [0, 1)."""
    threshold = level_threshold(level)
    return (total_sold % threshold) / threshold


def select_active_index(catalog: Catalog, total_sold: int) -> int:
    """Index of the item with the largest threshold not exceeding ``total_sold``."""
    if total_sold < 0:
        raise ValueError(f"total_sold must be non-negative, got {total_sold}")
    active = 0
    for index, item in enumerate(catalog):
        if total_sold >= item.activation_threshold:
            active = index
        else:
            break
    return active


def select_active_item(catalog: Catalog, total_sold: int) -> CatalogItem:
    """Return the item that should be on display after ``total_sold`` sales."""
    return catalog[select_active_index(catalog, total_sold)]


def advance_on_click(state: ProgressionState, catalog: Catalog) -> ProgressionState:
    """Apply one sale to ``state`` and return the resulting state.

    The sale is priced at the item active *before* the click. Progress is
    measured against the threshold of the level held before the click, so on
    the click that reaches the threshold it wraps to 0 while the level goes up.
    """
    price = select_active_item(catalog, state.total_sold).unit_price
    total_sold = state.total_sold + 1
    threshold = level_threshold(state.level)
    level = state.level + 1 if total_sold >= threshold else state.level
    if level != state.level:
        logger.info("Reached level %d after %d sales", level, total_sold)

    return ProgressionState(
        total_sold=total_sold,
        total_revenue=state.total_revenue + price,
        level=level,
        active_index=select_active_index(catalog, total_sold),
        progress=progress_fraction(total_sold, state.level),
    )
