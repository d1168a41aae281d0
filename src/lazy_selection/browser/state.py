"""BrowserState: reactive session state for the paginated record browser."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Any

import param
import pandas as pd

from ..config import Settings
from ..core.autofill import AutoFillEngine
from ..core.projector import HeaderState, VisibilityProjector
from ..core.records import Page, RECORD_COLUMNS
from ..core.selection_model import SelectionModel
from ..errors import PageUnavailableError
from ..logging_config import get_logger
from ..source.client import CollectionSource
from .loader import PageLoader

logger = get_logger(__name__)

NotifyHook = Callable[[str, str, str], Any]


class BrowserState(param.Parameterized):
    """Centralized reactive state for one browsing session.

    Owns the SelectionModel, the AutoFillEngine bound to it, and the
    VisibilityProjector used for rendering. Page loads go through a
    PageLoader, so only the most recently requested page ever becomes
    visible. Derived params (``selected_count``, ``header_state``,
    ``selected_positions``) are refreshed after every selection change.
    """

    # --- Paging ---
    current_page = param.Integer(default=1, bounds=(1, None))
    requested_page = param.Integer(default=1, bounds=(1, None))
    page_size = param.Integer(default=12, bounds=(1, None))
    total_records = param.Integer(default=1000, bounds=(0, None))
    is_loading = param.Boolean(default=False)

    # --- Visible page ---
    records = param.List(default=[])
    visible_ids = param.List(default=[])
    frame = param.DataFrame(default=None, allow_None=True)

    # --- Derived selection view ---
    selected_count = param.Integer(default=0)
    target_count = param.Integer(default=0)
    header_state = param.Selector(default=HeaderState.NONE, objects=list(HeaderState))
    selected_positions = param.List(default=[])

    # --- Status / notices ---
    status_text = param.String(default="")
    notices = param.List(default=[])

    def __init__(
        self,
        source: CollectionSource,
        settings: Settings | None = None,
        **params,
    ):
        settings = settings or Settings()
        params.setdefault("page_size", settings.page_size)
        params.setdefault("total_records", settings.default_total)
        super().__init__(**params)
        self.model = SelectionModel()
        self.engine = AutoFillEngine(self.model)
        self.projector = VisibilityProjector(self.model)
        self.loader = PageLoader(
            source, on_page=self._apply_page, on_error=self._on_page_error,
        )
        self.notify_hook: NotifyHook | None = None
        self.model.on_change(lambda _model: self._refresh_selection())
        self.frame = pd.DataFrame(columns=RECORD_COLUMNS)

    @property
    def page_count(self) -> int:
        if self.total_records == 0:
            return 1
        return max(1, math.ceil(self.total_records / self.page_size))

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------

    async def go_to_page(self, page_index: int) -> Page | None:
        """Request a page; it becomes visible only if still the latest."""
        self.param.update(requested_page=page_index, is_loading=True)
        try:
            return await self.loader.load(page_index)
        except Exception:
            if self.requested_page == page_index:
                self.param.update(
                    requested_page=self.current_page, is_loading=False,
                )
            raise

    async def next_page(self) -> Page | None:
        return await self.go_to_page(min(self.requested_page + 1, self.page_count))

    async def previous_page(self) -> Page | None:
        return await self.go_to_page(max(self.requested_page - 1, 1))

    def _apply_page(self, page: Page) -> None:
        self.param.update(
            current_page=page.index,
            records=list(page.records),
            frame=page.to_frame(),
            total_records=page.total_estimate,
            is_loading=False,
            status_text="",
        )
        # Assigned last so the fill sees the new page's ids
        self.visible_ids = page.ids
        self._refresh_selection()

    def _on_page_error(self, error: PageUnavailableError) -> None:
        # Paging continues from the page actually shown
        self.param.update(
            requested_page=self.current_page,
            is_loading=False,
            status_text=str(error),
        )
        self.notify("error", "Page unavailable", str(error))

    @param.depends("visible_ids", watch=True)
    def _on_visible_ids_changed(self):
        self.engine.show(self.visible_ids)

    # ------------------------------------------------------------------
    # Selection edits
    # ------------------------------------------------------------------

    def select_row(self, record_id: int) -> None:
        self.model.toggle(record_id, True)

    def unselect_row(self, record_id: int) -> None:
        self.model.toggle(record_id, False)

    def set_page_selection(self, selected_ids: Iterable[int]) -> None:
        """Apply a whole-page selection edit (e.g. a multi-row drag)."""
        self.model.set_visible_page_selection(self.visible_ids, selected_ids)

    def set_selected_positions(self, positions: Iterable[int]) -> None:
        """Like set_page_selection, but with row indices into the page."""
        ids = self.visible_ids
        self.set_page_selection(ids[i] for i in positions if 0 <= i < len(ids))

    def toggle_header(self, checked: bool) -> None:
        self.projector.on_header_toggle(checked, self.visible_ids)

    async def apply_bulk_selection(self, n: int) -> Page | None:
        """Select the first ``n`` records, growing as pages load.

        Clears any previous selection and returns to page 1.
        """
        self.model.set_target(n)
        logger.info("Bulk selection requested: first %d records", n)
        return await self.go_to_page(1)

    def clear_selection(self) -> None:
        self.model.reset()
        self.notify("info", "Selection Cleared", "All item selections have been reset")

    def effective_selection(self) -> set[int]:
        return self.projector.effective_selection(self.visible_ids)

    # ------------------------------------------------------------------
    # Notices
    # ------------------------------------------------------------------

    def notify(self, severity: str, summary: str, detail: str) -> None:
        """Record a user-facing notice and forward it to the UI hook."""
        self.notices = self.notices + [(severity, summary, detail)]
        if self.notify_hook is not None:
            self.notify_hook(severity, summary, detail)

    def _refresh_selection(self) -> None:
        ids = self.visible_ids
        self.param.update(
            selected_count=self.model.count(),
            target_count=self.model.target_count,
            header_state=self.projector.header_state(ids),
            selected_positions=self.projector.selected_positions(ids),
        )
