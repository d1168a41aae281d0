"""Tests for PageLoader: sequence numbers and stale-response discard."""

import asyncio

import pytest

from conftest import run
from lazy_selection.browser.loader import PageLoader


class _Recorder:
    def __init__(self):
        self.pages = []
        self.errors = []

    def on_page(self, page):
        self.pages.append(page.index)

    def on_error(self, error):
        self.errors.append(error.page_index)


class TestPageLoaderSequencing:
    def test_single_load_applies(self, synthetic_source):
        rec = _Recorder()
        loader = PageLoader(synthetic_source, rec.on_page, rec.on_error)
        page = run(loader.load(1))
        assert page.index == 1
        assert rec.pages == [1]
        assert loader.latest_sequence == 1

    def test_sequence_increases(self, synthetic_source):
        rec = _Recorder()
        loader = PageLoader(synthetic_source, rec.on_page)
        run(loader.load(1))
        run(loader.load(2))
        assert loader.latest_sequence == 2
        assert loader.is_current(2)
        assert not loader.is_current(1)

    def test_rejects_page_zero(self, synthetic_source):
        loader = PageLoader(synthetic_source, lambda page: None)
        with pytest.raises(ValueError, match="page_index"):
            run(loader.load(0))

    @pytest.mark.parametrize("release_order", [(2, 1), (1, 2)])
    def test_stale_response_discarded(self, gated_source, release_order):
        rec = _Recorder()
        loader = PageLoader(gated_source, rec.on_page, rec.on_error)

        async def scenario():
            first = asyncio.create_task(loader.load(2))
            await asyncio.sleep(0)
            second = asyncio.create_task(loader.load(1))
            await asyncio.sleep(0)
            for index in release_order:
                gated_source.release(index)
                await asyncio.sleep(0)
            return await first, await second

        stale, latest = run(scenario())
        assert gated_source.requested == [2, 1]
        assert stale is None
        assert latest.index == 1
        assert rec.pages == [1]


class TestPageLoaderErrors:
    def test_error_reported(self, failing_source):
        rec = _Recorder()
        loader = PageLoader(failing_source, rec.on_page, rec.on_error)
        assert run(loader.load(3)) is None
        assert rec.errors == [3]
        assert rec.pages == []

    def test_error_without_handler(self, failing_source):
        loader = PageLoader(failing_source, lambda page: None)
        assert run(loader.load(1)) is None
