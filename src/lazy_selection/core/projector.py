"""VisibilityProjector: what the current page should render as selected."""

from __future__ import annotations

import enum
from typing import Sequence

from .selection_model import SelectionModel


class HeaderState(enum.Enum):
    """Tri-state of a page's select-all checkbox."""

    ALL = "all"
    NONE = "none"
    PARTIAL = "partial"


class VisibilityProjector:
    """Read-side view of a SelectionModel for one visible page.

    Holds no state besides the model reference; every method is
    recomputed from the model on each call.
    """

    def __init__(self, model: SelectionModel) -> None:
        self._model = model

    def effective_selection(self, visible_ids: Sequence[int]) -> set[int]:
        """Visible IDs currently selected."""
        return {rid for rid in visible_ids if self._model.is_selected(rid)}

    def selected_positions(self, visible_ids: Sequence[int]) -> list[int]:
        """Row indices (within the page) of the selected IDs."""
        return [
            i for i, rid in enumerate(visible_ids)
            if self._model.is_selected(rid)
        ]

    def header_state(self, visible_ids: Sequence[int]) -> HeaderState:
        n_selected = len(self.effective_selection(visible_ids))
        if n_selected == 0:
            return HeaderState.NONE
        if n_selected == len(set(visible_ids)):
            return HeaderState.ALL
        return HeaderState.PARTIAL

    def on_header_toggle(self, checked: bool, visible_ids: Sequence[int]) -> None:
        """Select or clear the whole visible page."""
        selected = visible_ids if checked else ()
        self._model.set_visible_page_selection(visible_ids, selected)
