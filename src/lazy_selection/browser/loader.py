"""PageLoader: sequence-numbered page requests with stale-response discard."""

from __future__ import annotations

from typing import Callable, Any

from ..core.records import Page
from ..errors import PageUnavailableError
from ..logging_config import get_logger
from ..source.client import CollectionSource

logger = get_logger(__name__)

PageCallback = Callable[[Page], Any]
ErrorCallback = Callable[[PageUnavailableError], Any]


class PageLoader:
    """Issues page fetches and applies only the most recent one.

    Every call to :meth:`load` takes the next sequence number. When a fetch
    completes, its page is handed to ``on_page`` only if no newer request
    has been issued in the meantime; older responses are dropped. Failures
    of the latest request go to ``on_error``; failures of stale requests
    are dropped too.
    """

    def __init__(
        self,
        source: CollectionSource,
        on_page: PageCallback,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self.source = source
        self._on_page = on_page
        self._on_error = on_error
        self._issued = 0

    @property
    def latest_sequence(self) -> int:
        return self._issued

    def is_current(self, sequence: int) -> bool:
        return sequence == self._issued

    async def load(self, page_index: int) -> Page | None:
        """Fetch ``page_index`` and apply it if still current.

        Returns the applied Page, or None when the response was stale or
        the fetch failed.
        """
        if page_index < 1:
            raise ValueError(f"page_index must be >= 1, got {page_index}")
        self._issued += 1
        sequence = self._issued
        logger.debug("Request #%d: page %d", sequence, page_index)

        try:
            page = await self.source.fetch_page(page_index)
        except PageUnavailableError as e:
            if not self.is_current(sequence):
                logger.debug("Discarding stale failure #%d (%s)", sequence, e)
                return None
            logger.warning("%s", e)
            if self._on_error is not None:
                self._on_error(e)
            return None

        if not self.is_current(sequence):
            logger.debug(
                "Discarding stale response #%d for page %d (latest is #%d)",
                sequence, page_index, self._issued,
            )
            return None

        self._on_page(page)
        return page
