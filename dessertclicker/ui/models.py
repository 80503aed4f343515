"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass

from dessertclicker.core.catalog import Catalog
from dessertclicker.core.progression import ProgressionState, select_active_item
from dessertclicker.core.strings import StringRepository

# Shown when a dessert has no image asset.
DESSERT_GLYPHS = {
    "cupcake": "🧁",
    "donut": "🍩",
    "eclair": "🥖",
    "froyo": "🍦",
    "gingerbread": "🍪",
    "honeycomb": "🍯",
    "icecreamsandwich": "🍨",
    "jellybean": "🫘",
    "kitkat": "🍫",
    "lollipop": "🍭",
    "marshmallow": "☁",
    "nougat": "🍬",
    "oreo": "🍪",
}
DEFAULT_GLYPH = "🍰"


@dataclass
class ScreenState:
    """Everything the dessert screen renders for one progression state."""

    dessert_name: str
    display_ref: str
    glyph: str
    level_text: str
    progress_percent: int
    desserts_sold_text: str
    revenue_text: str

    @classmethod
    def from_progression(
        cls,
        state: ProgressionState,
        catalog: Catalog,
        strings: StringRepository,
    ) -> "ScreenState":
        item = select_active_item(catalog, state.total_sold)
        return cls(
            dessert_name=item.name,
            display_ref=item.display_ref,
            glyph=DESSERT_GLYPHS.get(item.display_ref, DEFAULT_GLYPH),
            level_text=strings.format("level", level=state.level),
            progress_percent=round(state.progress * 100),
            desserts_sold_text=str(state.total_sold),
            revenue_text=f"${state.total_revenue}",
        )
