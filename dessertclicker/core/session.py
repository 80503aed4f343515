from __future__ import annotations

import logging
from typing import Callable, List

from dessertclicker.core.catalog import Catalog, CatalogItem
from dessertclicker.core.progression import ProgressionState, advance_on_click, select_active_item

logger = logging.getLogger(__name__)

StateObserver = Callable[[ProgressionState], None]


class ClickerSession:
    """Holds the progression state for one run of the game.

    The session is the only owner of the state. Each call to :meth:`click`
    replaces it with the result of :func:`advance_on_click` and then notifies
    observers, which is how the window learns it has to re-render.
    """

    def __init__(self, catalog: Catalog) -> None:
        """Start a fresh session over ``catalog``."""
        self._catalog = catalog
        self._state = ProgressionState.initial()
        self._observers: List[StateObserver] = []

    @property
    def catalog(self) -> Catalog:
        """Catalog the session sells from."""
        return self._catalog

    @property
    def state(self) -> ProgressionState:
        """Current progression state."""
        return self._state

    @property
    def active_item(self) -> CatalogItem:
        """Item currently on display."""
        return select_active_item(self._catalog, self._state.total_sold)

    def subscribe(self, observer: StateObserver) -> None:
        """Register ``observer`` to be called with the new state after every change."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: StateObserver) -> None:
        """Remove a previously registered observer (no-op if unknown)."""
        if observer in self._observers:
            self._observers.remove(observer)

    def click(self) -> ProgressionState:
        """Sell one item and return the new state."""
        self._state = advance_on_click(self._state, self._catalog)
        logger.debug(
            "Sold %d, revenue %d, level %d",
            self._state.total_sold,
            self._state.total_revenue,
            self._state.level,
        )
        self._notify()
        return self._state

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self._state)
