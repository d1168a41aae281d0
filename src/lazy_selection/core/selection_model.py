"""SelectionModel: include/exclude sets plus a bulk target count.

Tracks which record IDs are selected across every page the user has ever
seen (or will see). An ID is in at most one of the two sets; IDs in neither
are undecided and remain eligible for auto-fill.
"""

from __future__ import annotations

import enum
from typing import Callable, Iterable, Any


ChangeCallback = Callable[["SelectionModel"], Any]


class Membership(enum.Enum):
    """Three-valued membership of a record ID."""

    SELECTED = "selected"
    EXCLUDED = "excluded"
    UNDECIDED = "undecided"


class SelectionModel:
    """Authoritative cross-page selection state.

    ``included`` holds IDs explicitly or automatically selected,
    ``excluded`` holds IDs the user explicitly deselected. A bulk
    "select first N" request is recorded as ``target_count``; 0 means
    no outstanding request.

    Registered callbacks run after every mutation, once per operation.
    """

    def __init__(self) -> None:
        self._included: set[int] = set()
        self._excluded: set[int] = set()
        self._target_count: int = 0
        self._callbacks: list[ChangeCallback] = []

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def included(self) -> frozenset[int]:
        return frozenset(self._included)

    @property
    def excluded(self) -> frozenset[int]:
        return frozenset(self._excluded)

    @property
    def target_count(self) -> int:
        return self._target_count

    @property
    def is_satisfied(self) -> bool:
        """True when no bulk request is outstanding or it has been met."""
        return self._target_count == 0 or self.count() >= self._target_count

    def is_selected(self, record_id: int) -> bool:
        return record_id in self._included

    def is_excluded(self, record_id: int) -> bool:
        return record_id in self._excluded

    def membership(self, record_id: int) -> Membership:
        if record_id in self._included:
            return Membership.SELECTED
        if record_id in self._excluded:
            return Membership.EXCLUDED
        return Membership.UNDECIDED

    def count(self) -> int:
        return len(self._included)

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def set_target(self, n: int) -> None:
        """Start a bulk "select first N" request from a clean slate."""
        if n < 0:
            raise ValueError(f"target count must be non-negative, got {n}")
        self._included.clear()
        self._excluded.clear()
        self._target_count = int(n)
        self._notify()

    def toggle(self, record_id: int, want_selected: bool) -> None:
        """Mark one ID selected or explicitly unselected."""
        self._apply(record_id, want_selected)
        self._notify()

    def set_visible_page_selection(
        self,
        visible_ids: Iterable[int],
        selected_ids: Iterable[int],
    ) -> None:
        """Replace the selection of a whole visible page at once.

        Every visible ID found in ``selected_ids`` becomes selected, every
        other visible ID becomes excluded. IDs outside ``visible_ids`` are
        left alone. Callbacks fire once, after the whole page is applied.
        """
        wanted = set(selected_ids)
        for record_id in visible_ids:
            self._apply(record_id, record_id in wanted)
        self._notify()

    def reset(self) -> None:
        """Clear the selection and drop any bulk request."""
        self.set_target(0)

    def on_change(self, callback: ChangeCallback) -> None:
        """Register a callback: fn(model)."""
        self._callbacks.append(callback)

    def _apply(self, record_id: int, want_selected: bool) -> None:
        if want_selected:
            self._excluded.discard(record_id)
            self._included.add(record_id)
        else:
            self._included.discard(record_id)
            self._excluded.add(record_id)

    def _notify(self) -> None:
        for cb in list(self._callbacks):
            cb(self)

    def __repr__(self) -> str:
        return (
            f"SelectionModel(included={len(self._included)}, "
            f"excluded={len(self._excluded)}, target={self._target_count})"
        )
