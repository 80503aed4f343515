"""Desktop hand-off for the share action."""

from __future__ import annotations

from PySide6.QtCore import QUrl, QUrlQuery
from PySide6.QtGui import QDesktopServices

from dessertclicker.core.share import ShareRequest


def share_url(request: ShareRequest) -> QUrl:
    """``mailto:`` URL carrying the summary as the message body."""
    url = QUrl("mailto:")
    query = QUrlQuery()
    query.addQueryItem("body", request.text)
    url.setQuery(query)
    return url


def desktop_share_opener(request: ShareRequest) -> bool:
    """Open the host's default handler for the summary.

    Returns False when the desktop has no application registered for it.
    """
    return QDesktopServices.openUrl(share_url(request))
