"""AutoFillEngine: progressively satisfies a "select first N" request.

The engine watches one SelectionModel. Whenever the visible page changes,
the target changes, or the include/exclude sets change, it walks the
currently visible IDs in order and selects undecided ones until the
target is reached or the page runs out. It never touches IDs the user
has explicitly excluded and never removes anything from the selection.
"""

from __future__ import annotations

from typing import Iterable

from .selection_model import SelectionModel, Membership
from ..logging_config import get_logger

logger = get_logger(__name__)


class AutoFillEngine:
    """Fills a SelectionModel from the visible page up to its target.

    Attaching to the model makes the engine reactive: every model change
    re-runs :meth:`fill` against the last sequence passed to :meth:`show`.
    Notifications caused by the engine's own toggles are ignored while a
    fill is in progress.
    """

    def __init__(self, model: SelectionModel, attach: bool = True) -> None:
        self._model = model
        self._visible_ids: tuple[int, ...] = ()
        self._filling = False
        if attach:
            model.on_change(self._on_model_change)

    @property
    def model(self) -> SelectionModel:
        return self._model

    @property
    def visible_ids(self) -> tuple[int, ...]:
        return self._visible_ids

    def show(self, visible_ids: Iterable[int]) -> int:
        """Publish a new visible ID sequence and fill against it.

        Returns the number of IDs auto-selected.
        """
        self._visible_ids = tuple(visible_ids)
        return self.fill()

    def fill(self) -> int:
        """Select undecided visible IDs until the target is met.

        Returns the number of IDs added. A no-op when the model has no
        outstanding target or the target is already satisfied.
        """
        model = self._model
        if model.is_satisfied or self._filling:
            return 0

        added = 0
        self._filling = True
        try:
            for record_id in self._visible_ids:
                if model.count() >= model.target_count:
                    break
                if model.membership(record_id) is Membership.UNDECIDED:
                    model.toggle(record_id, True)
                    added += 1
        finally:
            self._filling = False

        if added:
            logger.debug(
                "Auto-filled %d id(s): %d/%d selected",
                added, model.count(), model.target_count,
            )
        return added

    def _on_model_change(self, model: SelectionModel) -> None:
        if not self._filling:
            self.fill()
