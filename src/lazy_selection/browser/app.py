"""BrowserApp: Panel UI around a BrowserState."""

from __future__ import annotations

import panel as pn

from ..core.projector import HeaderState
from ..logging_config import get_logger
from .state import BrowserState

logger = get_logger(__name__)

_HEADER_LABELS = {
    HeaderState.ALL: "All rows on this page selected",
    HeaderState.PARTIAL: "Some rows on this page selected",
    HeaderState.NONE: "No rows on this page selected",
}

_TITLE_FORMATTER = {"type": "textarea"}


class BrowserApp:
    """Interactive record browser.

    Assembles a Panel layout with:
    - a page-level select-all checkbox with its tri-state caption
    - a "select first N" input and Apply button
    - the current page as a checkbox-selectable Tabulator
    - pager buttons, a selected-count label and a Reset button

    Widget events are translated into BrowserState calls; state changes
    are pushed back into the widgets under a sync guard so that the
    echo does not register as a user edit.
    """

    def __init__(self, state: BrowserState) -> None:
        pn.extension("tabulator", notifications=True, sizing_mode="stretch_width")

        self.state = state
        self.state.notify_hook = self._show_notification
        self._syncing = False

        self.table = pn.widgets.Tabulator(
            state.frame,
            selectable="checkbox",
            show_index=False,
            disabled=True,
            layout="fit_data_stretch",
            formatters={"title": _TITLE_FORMATTER},
            titles={"id": "ID", "title": "Artwork Title", "artist_display": "Artist"},
        )
        self.header_checkbox = pn.widgets.Checkbox(name="Select page", value=False)
        self.header_caption = pn.pane.Markdown("", margin=(0, 10))
        self.target_input = pn.widgets.IntInput(
            name="How many rows to select?", value=0, start=0, width=200,
        )
        self.apply_button = pn.widgets.Button(
            name="Apply Selection", button_type="primary", width=140,
        )
        self.reset_button = pn.widgets.Button(
            name="Reset All", button_type="light", width=100,
        )
        self.prev_button = pn.widgets.Button(name="‹ Prev", width=80)
        self.next_button = pn.widgets.Button(name="Next ›", width=80)
        self.page_label = pn.pane.Markdown("")
        self.count_label = pn.pane.Markdown("")

        # Widgets -> state
        self.table.param.watch(self._on_table_selection, "selection")
        self.header_checkbox.param.watch(self._on_header_checkbox, "value")
        self.apply_button.on_click(self._on_apply)
        self.reset_button.on_click(self._on_reset)
        self.prev_button.on_click(self._on_prev)
        self.next_button.on_click(self._on_next)

        # State -> widgets
        self.state.param.watch(
            self._sync_page, ["frame", "current_page", "total_records", "is_loading"],
        )
        self.state.param.watch(
            self._sync_selection,
            ["selected_positions", "header_state", "selected_count", "target_count"],
        )
        self._sync_page()
        self._sync_selection()

    # ------------------------------------------------------------------
    # Widget callbacks
    # ------------------------------------------------------------------

    def _on_table_selection(self, event) -> None:
        if self._syncing:
            return
        old, new = set(event.old or ()), set(event.new or ())
        added, removed = new - old, old - new
        ids = self.state.visible_ids
        # A single click is a per-row toggle, not a whole-page edit
        if len(added) + len(removed) == 1:
            position = next(iter(added or removed))
            if 0 <= position < len(ids):
                if added:
                    self.state.select_row(ids[position])
                else:
                    self.state.unselect_row(ids[position])
            return
        self.state.set_selected_positions(event.new)

    def _on_header_checkbox(self, event) -> None:
        if self._syncing:
            return
        self.state.toggle_header(bool(event.new))

    async def _on_apply(self, event) -> None:
        n = self.target_input.value or 0
        await self.state.apply_bulk_selection(int(n))

    def _on_reset(self, event) -> None:
        self.state.clear_selection()

    async def _on_prev(self, event) -> None:
        await self.state.previous_page()

    async def _on_next(self, event) -> None:
        await self.state.next_page()

    async def _initial_load(self) -> None:
        await self.state.go_to_page(self.state.requested_page)

    # ------------------------------------------------------------------
    # State sync
    # ------------------------------------------------------------------

    def _sync_page(self, *events) -> None:
        state = self.state
        self._syncing = True
        try:
            self.table.value = state.frame
            self.table.selection = list(state.selected_positions)
            self.table.loading = state.is_loading
        finally:
            self._syncing = False
        self.page_label.object = f"Page {state.current_page} of {state.page_count}"
        self.prev_button.disabled = state.requested_page <= 1
        self.next_button.disabled = state.requested_page >= state.page_count

    def _sync_selection(self, *events) -> None:
        state = self.state
        self._syncing = True
        try:
            self.table.selection = list(state.selected_positions)
            self.header_checkbox.value = state.header_state is HeaderState.ALL
        finally:
            self._syncing = False
        self.header_caption.object = _HEADER_LABELS[state.header_state]
        text = f"**Selected Items:** {state.selected_count}"
        if state.target_count:
            text += f" of {state.target_count} requested"
        self.count_label.object = text

    def _show_notification(self, severity: str, summary: str, detail: str) -> None:
        notifications = pn.state.notifications
        if notifications is None:
            logger.info("%s: %s", summary, detail)
            return
        message = f"{summary}: {detail}"
        if severity == "error":
            notifications.error(message)
        elif severity == "warning":
            notifications.warning(message)
        else:
            notifications.info(message)

    # ------------------------------------------------------------------
    # Layout / serving
    # ------------------------------------------------------------------

    def build_layout(self) -> pn.Column:
        header_row = pn.Row(self.header_checkbox, self.header_caption)
        bulk_row = pn.Row(self.target_input, self.apply_button)
        status_row = pn.Row(self.count_label, pn.layout.HSpacer(), self.reset_button)
        pager_row = pn.Row(self.prev_button, self.page_label, self.next_button)
        return pn.Column(
            bulk_row,
            status_row,
            header_row,
            self.table,
            pager_row,
        )

    def build_template(self) -> pn.template.MaterialTemplate:
        template = pn.template.MaterialTemplate(
            title="lazy selection",
            header_background="#fafafa",
            header_color="#202124",
        )
        template.main.append(self.build_layout())
        pn.state.onload(self._initial_load)
        return template

    def serve(self, port: int = 0, show: bool = True, **kwargs) -> None:
        """Start the Panel server and optionally open the browser.

        Parameters
        ----------
        port : int
            Port number. 0 = auto-assign.
        show : bool
            Whether to open the browser automatically.
        **kwargs
            Additional keyword arguments passed to pn.serve().
        """
        pn.serve(
            self.build_template,
            port=port or 0,
            show=show,
            title="lazy-selection browser",
            **kwargs,
        )
