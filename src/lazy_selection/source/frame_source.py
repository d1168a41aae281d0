"""FrameCollectionSource: serves pages out of a local DataFrame."""

from __future__ import annotations

import asyncio

import numpy as np
import pandas as pd

from ..core.records import Page, Record, RECORD_COLUMNS
from ..errors import PageUnavailableError

_SYNTHETIC_ARTISTS = [
    "Claude Monet", "Mary Cassatt", "Georges Seurat", "Katsushika Hokusai",
    "Grant Wood", "Edward Hopper", "Vincent van Gogh", "Berthe Morisot",
]
_SYNTHETIC_SUBJECTS = [
    "Water Lilies", "Haystacks", "Street Scene", "The Wave", "Portrait",
    "Still Life", "Harbor at Dusk", "Garden",
]


class FrameCollectionSource:
    """A collection source backed by a pandas DataFrame.

    Pages are contiguous ``page_size`` slices in the frame's row order.
    Requesting a page past the end yields an empty page.

    Parameters
    ----------
    frame : pd.DataFrame
        Must contain an ``id`` column; ``title`` and ``artist_display``
        are optional and default per record.
    page_size : int
        Records per page.
    delay : float
        Seconds to sleep before returning, to mimic network latency.
    """

    def __init__(
        self,
        frame: pd.DataFrame,
        page_size: int = 12,
        delay: float = 0.0,
    ) -> None:
        if "id" not in frame.columns:
            raise KeyError("Frame must contain an 'id' column.")
        if frame["id"].duplicated().any():
            raise ValueError("Record ids must be unique.")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self._frame = frame.reset_index(drop=True)
        self.page_size = page_size
        self.delay = delay

    @classmethod
    def synthetic(
        cls,
        n_records: int,
        page_size: int = 12,
        seed: int = 42,
        delay: float = 0.0,
    ) -> FrameCollectionSource:
        """A reproducible catalogue with ids ``1..n_records``."""
        rng = np.random.default_rng(seed)
        subjects = rng.choice(_SYNTHETIC_SUBJECTS, size=n_records)
        artists = rng.choice(_SYNTHETIC_ARTISTS, size=n_records)
        frame = pd.DataFrame({
            "id": np.arange(1, n_records + 1),
            "title": [f"{s} No. {i + 1}" for i, s in enumerate(subjects)],
            "artist_display": artists,
        })
        return cls(frame, page_size=page_size, delay=delay)

    @property
    def total(self) -> int:
        return len(self._frame)

    async def fetch_page(self, page_index: int) -> Page:
        if page_index < 1:
            raise PageUnavailableError(page_index, "page index must be >= 1")
        if self.delay:
            await asyncio.sleep(self.delay)
        start = (page_index - 1) * self.page_size
        chunk = self._frame.iloc[start:start + self.page_size]
        cols = [c for c in RECORD_COLUMNS if c in chunk.columns]
        records = tuple(
            Record.from_mapping(row) for row in chunk[cols].to_dict("records")
        )
        return Page(index=page_index, records=records, total_estimate=self.total)
