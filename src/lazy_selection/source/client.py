"""ArtworkClient: pages of artworks from the Art Institute of Chicago API."""

from __future__ import annotations

from typing import Protocol

import httpx

from ..config import Settings
from ..core.records import Page, Record
from ..errors import PageUnavailableError
from ..logging_config import get_logger

logger = get_logger(__name__)

_FIELDS = "id,title,artist_display"


class CollectionSource(Protocol):
    """Anything that can deliver one page of records at a time."""

    async def fetch_page(self, page_index: int) -> Page: ...


class ArtworkClient:
    """Fetches artwork pages over HTTP.

    ``fetch_page`` either returns a complete Page or raises
    PageUnavailableError; it never returns a partial page.

    Parameters
    ----------
    settings : Settings, optional
        Base URL, page size and timeout. Defaults to ``Settings()``.
    client : httpx.AsyncClient, optional
        Shared client (e.g. one with a mock transport). When omitted the
        ArtworkClient creates and owns one.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.settings.timeout)

    async def fetch_page(self, page_index: int) -> Page:
        url = f"{self.settings.api_base_url}/artworks"
        params = {
            "page": page_index,
            "limit": self.settings.page_size,
            "fields": _FIELDS,
        }
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.warning("Fetching page %d failed: %s", page_index, e)
            raise PageUnavailableError(page_index, str(e)) from e
        except ValueError as e:
            logger.warning("Page %d returned malformed JSON: %s", page_index, e)
            raise PageUnavailableError(page_index, "malformed JSON") from e

        return self._parse_page(page_index, payload)

    def _parse_page(self, page_index: int, payload: object) -> Page:
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            raise PageUnavailableError(page_index, "response has no 'data' list")
        try:
            records = tuple(Record.from_mapping(item) for item in payload["data"])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise PageUnavailableError(page_index, f"bad record: {e}") from e

        total = self.settings.default_total
        pagination = payload.get("pagination")
        if isinstance(pagination, dict) and pagination.get("total"):
            try:
                total = int(pagination["total"])
            except (TypeError, ValueError) as e:
                raise PageUnavailableError(page_index, f"bad total: {e}") from e

        logger.debug("Fetched page %d: %d records", page_index, len(records))
        return Page(index=page_index, records=records, total_estimate=total)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ArtworkClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
