from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True)
class CatalogItem:
    name: str
    unit_price: int
    display_ref: str
    activation_threshold: int


DESSERTS: Tuple[CatalogItem, ...] = (
    CatalogItem("Cupcake", 5, "cupcake", 0),
    CatalogItem("Donut", 10, "donut", 5),
    CatalogItem("Eclair", 15, "eclair", 20),
    CatalogItem("Froyo", 30, "froyo", 50),
    CatalogItem("Gingerbread", 50, "gingerbread", 100),
    CatalogItem("Honeycomb", 100, "honeycomb", 200),
    CatalogItem("Ice Cream Sandwich", 500, "icecreamsandwich", 500),
    CatalogItem("Jellybean", 1000, "jellybean", 1000),
    CatalogItem("KitKat", 2000, "kitkat", 2000),
    CatalogItem("Lollipop", 3000, "lollipop", 4000),
    CatalogItem("Marshmallow", 4000, "marshmallow", 8000),
    CatalogItem("Nougat", 5000, "nougat", 16000),
    CatalogItem("Oreo", 6000, "oreo", 20000),
)


class Catalog:
    """Fixed, ordered sequence of items sorted by activation threshold."""

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items = tuple(items)
        self._validate()

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> CatalogItem:
        return self._items[index]

    def first(self) -> CatalogItem:
        return self._items[0]

    def _validate(self) -> None:
        if not self._items:
            raise ValueError("catalog must contain at least one item")
        if self._items[0].activation_threshold != 0:
            raise ValueError(
                f"{self._items[0].name}: first item must have activation threshold 0"
            )
        previous = 0
        for item in self._items:
            if item.unit_price <= 0:
                raise ValueError(f"{item.name}: unit price must be positive")
            if item.activation_threshold < previous:
                raise ValueError(
                    f"{item.name}: activation thresholds must be in ascending order"
                )
            previous = item.activation_threshold


def default_catalog() -> Catalog:
    """Return the built-in dessert catalog."""
    return Catalog(DESSERTS)
