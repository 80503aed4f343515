"""Summary text for the share action and the hand-off to the host."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from dessertclicker.core.progression import ProgressionState
from dessertclicker.core.strings import StringRepository

logger = logging.getLogger(__name__)

PLAIN_TEXT = "text/plain"


class ShareUnavailableError(Exception):
    """No share-capable target exists on the host.

    ``str(error)`` is the notice to show the user.
    """


@dataclass(frozen=True)
class ShareRequest:
    text: str
    mime_type: str = PLAIN_TEXT


# Returns True once the request is handed to a target, False if there is none.
ShareOpener = Callable[[ShareRequest], bool]


def format_share_text(template: str, desserts_sold: int, revenue: int) -> str:
    return template.format(desserts_sold=desserts_sold, revenue=revenue)


class ShareService:
    def __init__(self, strings: StringRepository, opener: ShareOpener) -> None:
        self._strings = strings
        self._opener = opener

    def build_request(self, state: ProgressionState) -> ShareRequest:
        text = format_share_text(
            self._strings.get("share_text"),
            state.total_sold,
            state.total_revenue,
        )
        return ShareRequest(text=text)

    def share(self, state: ProgressionState) -> ShareRequest:
        """Hand the summary for ``state`` to the opener.

        Raises :class:`ShareUnavailableError` when the opener reports that no
        target could take it.
        """
        request = self.build_request(state)
        if not self._opener(request):
            logger.warning("No share target available for %s", request.mime_type)
            raise ShareUnavailableError(self._strings.get("sharing_not_available"))
        logger.info("Shared summary: %s", request.text)
        return request
