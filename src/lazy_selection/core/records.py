"""Record and Page: the payloads a collection source hands to the core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import pandas as pd

DEFAULT_TITLE = "Untitled"
DEFAULT_ARTIST = "Unknown Artist"

RECORD_COLUMNS = ["id", "title", "artist_display"]


def _text_or_default(value: Any, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str) and pd.isna(value):
        return default
    text = str(value)
    return text if text else default


@dataclass(frozen=True)
class Record:
    """One row of the remote collection."""

    id: int
    title: str = DEFAULT_TITLE
    artist_display: str = DEFAULT_ARTIST

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Record:
        """Build a Record from a JSON object or DataFrame row.

        Missing or empty ``title``/``artist_display`` fall back to
        ``"Untitled"``/``"Unknown Artist"``.
        """
        if raw.get("id") is None:
            raise KeyError("Record is missing an 'id'.")
        return cls(
            id=int(raw["id"]),
            title=_text_or_default(raw.get("title"), DEFAULT_TITLE),
            artist_display=_text_or_default(
                raw.get("artist_display"), DEFAULT_ARTIST,
            ),
        )


@dataclass(frozen=True)
class Page:
    """A single fetched page, in the collection's stable order."""

    index: int
    records: tuple[Record, ...]
    total_estimate: int

    @property
    def ids(self) -> list[int]:
        return [r.id for r in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def to_frame(self) -> pd.DataFrame:
        """Records as a DataFrame with the columns the table renders."""
        return pd.DataFrame(
            [(r.id, r.title, r.artist_display) for r in self.records],
            columns=RECORD_COLUMNS,
        )
