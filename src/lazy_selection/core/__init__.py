"""Cross-page selection core: model, auto-fill engine and projector."""

from .selection_model import SelectionModel, Membership
from .autofill import AutoFillEngine
from .projector import VisibilityProjector, HeaderState
from .records import Record, Page

__all__ = [
    "SelectionModel",
    "Membership",
    "AutoFillEngine",
    "VisibilityProjector",
    "HeaderState",
    "Record",
    "Page",
]
