"""Collection sources that deliver records one page at a time."""

from .client import ArtworkClient, CollectionSource
from .frame_source import FrameCollectionSource

__all__ = [
    "ArtworkClient",
    "CollectionSource",
    "FrameCollectionSource",
]
