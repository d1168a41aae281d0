"""Tests for SelectionModel: include/exclude sets and target count."""

import numpy as np
import pytest

from lazy_selection.core.selection_model import SelectionModel, Membership


class TestSelectionModelInitialState:
    def test_empty(self, model):
        assert model.count() == 0
        assert model.included == frozenset()
        assert model.excluded == frozenset()
        assert model.target_count == 0

    def test_satisfied_without_target(self, model):
        assert model.is_satisfied

    def test_unknown_id_is_undecided(self, model):
        assert model.membership(42) is Membership.UNDECIDED
        assert not model.is_selected(42)


class TestSelectionModelToggle:
    def test_select(self, model):
        model.toggle(7, True)
        assert model.is_selected(7)
        assert model.membership(7) is Membership.SELECTED
        assert model.count() == 1

    def test_idempotent(self, model):
        model.toggle(7, True)
        once = (model.included, model.excluded, model.target_count)
        model.toggle(7, True)
        assert (model.included, model.excluded, model.target_count) == once

    def test_inverse(self, model):
        model.toggle(7, True)
        model.toggle(7, False)
        assert 7 in model.excluded
        assert 7 not in model.included
        assert model.membership(7) is Membership.EXCLUDED

    def test_reselect_after_exclude(self, model):
        model.toggle(7, False)
        model.toggle(7, True)
        assert model.included == {7}
        assert model.excluded == frozenset()

    def test_does_not_change_target(self, model):
        model.set_target(10)
        model.toggle(1, True)
        model.toggle(2, False)
        assert model.target_count == 10

    def test_never_seen_id_is_legal(self, model):
        model.toggle(999_999, True)
        assert model.is_selected(999_999)


class TestSelectionModelSetTarget:
    def test_clears_both_sets(self, model):
        model.toggle(1, True)
        model.toggle(2, False)
        model.set_target(5)
        assert model.included == frozenset()
        assert model.excluded == frozenset()
        assert model.target_count == 5

    def test_negative_raises(self, model):
        with pytest.raises(ValueError, match="non-negative"):
            model.set_target(-1)

    def test_satisfaction(self, model):
        model.set_target(2)
        assert not model.is_satisfied
        model.toggle(1, True)
        model.toggle(2, True)
        assert model.is_satisfied


class TestSelectionModelPageSelection:
    def test_applies_whole_page(self, model):
        model.set_visible_page_selection([1, 2, 3, 4], {2, 4})
        assert model.included == {2, 4}
        assert model.excluded == {1, 3}

    def test_ignores_ids_outside_page(self, model):
        model.toggle(50, True)
        model.set_visible_page_selection([1, 2], {2, 50, 60})
        assert model.included == {2, 50}
        assert model.excluded == {1}
        assert 60 not in model.included

    def test_single_notification(self, model):
        calls = []
        model.on_change(lambda m: calls.append(m.count()))
        model.set_visible_page_selection([1, 2, 3], {1, 2, 3})
        assert calls == [3]


class TestSelectionModelReset:
    def test_reset(self, model):
        model.set_target(3)
        model.toggle(1, True)
        model.toggle(2, False)
        model.reset()
        assert model.count() == 0
        assert model.target_count == 0
        assert model.excluded == frozenset()

    def test_set_target_after_reset_matches_fresh(self, model):
        model.toggle(1, False)
        model.reset()
        model.set_target(4)
        fresh = SelectionModel()
        fresh.set_target(4)
        assert (model.included, model.excluded, model.target_count) == (
            fresh.included, fresh.excluded, fresh.target_count,
        )


class TestSelectionModelCallbacks:
    def test_called_after_each_mutation(self, model):
        calls = []
        model.on_change(lambda m: calls.append(m))
        model.toggle(1, True)
        model.set_target(3)
        model.reset()
        assert len(calls) == 3
        assert all(c is model for c in calls)

    def test_repr(self, model):
        model.set_target(5)
        model.toggle(1, True)
        assert repr(model) == "SelectionModel(included=1, excluded=0, target=5)"


class TestSelectionModelDisjointness:
    def test_random_operation_sequences(self, model):
        rng = np.random.default_rng(42)
        for _ in range(500):
            op = rng.integers(0, 4)
            rid = int(rng.integers(1, 21))
            if op == 0:
                model.toggle(rid, bool(rng.integers(0, 2)))
            elif op == 1:
                start = int(rng.integers(1, 15))
                visible = list(range(start, start + 6))
                chosen = {v for v in visible if rng.random() < 0.5}
                model.set_visible_page_selection(visible, chosen)
            elif op == 2:
                model.set_target(int(rng.integers(0, 10)))
            else:
                model.toggle(rid, False)
            assert model.included.isdisjoint(model.excluded)
