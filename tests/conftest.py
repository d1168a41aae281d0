"""Shared test fixtures for lazy-selection."""

import asyncio

import pandas as pd
import pytest

from lazy_selection.core.autofill import AutoFillEngine
from lazy_selection.core.projector import VisibilityProjector
from lazy_selection.core.records import Page, Record
from lazy_selection.core.selection_model import SelectionModel
from lazy_selection.errors import PageUnavailableError
from lazy_selection.source.frame_source import FrameCollectionSource


class GatedSource:
    """Source whose fetches block until the test releases them.

    Pages hold consecutive ids: page ``n`` is ``(n-1)*size+1 .. n*size``.
    """

    def __init__(self, page_size: int = 12, total: int = 120):
        self.page_size = page_size
        self.total = total
        self.requested: list[int] = []
        self._gates: dict[int, asyncio.Event] = {}

    def _gate(self, page_index: int) -> asyncio.Event:
        return self._gates.setdefault(page_index, asyncio.Event())

    def release(self, page_index: int) -> None:
        self._gate(page_index).set()

    async def fetch_page(self, page_index: int) -> Page:
        self.requested.append(page_index)
        await self._gate(page_index).wait()
        start = (page_index - 1) * self.page_size + 1
        records = tuple(
            Record(id=i, title=f"Work {i}", artist_display="Artist")
            for i in range(start, start + self.page_size)
        )
        return Page(index=page_index, records=records, total_estimate=self.total)


class FailingSource:
    """Source that always reports the page as unavailable."""

    async def fetch_page(self, page_index: int) -> Page:
        raise PageUnavailableError(page_index, "connection refused")


@pytest.fixture
def model():
    return SelectionModel()


@pytest.fixture
def engine(model):
    return AutoFillEngine(model)


@pytest.fixture
def projector(model):
    return VisibilityProjector(model)


@pytest.fixture
def page_one():
    """Ids of the first 12-record page."""
    return list(range(1, 13))


@pytest.fixture
def page_two():
    """Ids of the second 12-record page."""
    return list(range(13, 25))


@pytest.fixture
def synthetic_source():
    """30 records, 12 per page: pages of 12, 12 and 6."""
    return FrameCollectionSource.synthetic(30, page_size=12)


@pytest.fixture
def gated_source():
    return GatedSource()


@pytest.fixture
def failing_source():
    return FailingSource()


@pytest.fixture
def artwork_frame():
    """Small frame with gaps in the text columns."""
    return pd.DataFrame({
        "id": [101, 102, 103],
        "title": ["Nighthawks", None, ""],
        "artist_display": ["Edward Hopper", "Grant Wood", None],
    })


def run(coro):
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)
