"""Tests for the selector state machine and categories."""

import pytest

from objkit import DuplicateError, OrderError
from objkit.selector import Category, Combinator, SelectorState


class TestCategory:
    def test_total_order(self):
        assert (
            Category.ELEMENT
            < Category.ID
            < Category.CLASS
            < Category.ATTRIBUTE
            < Category.PSEUDO_CLASS
            < Category.PSEUDO_ELEMENT
        )

    def test_unique_categories(self):
        assert {c for c in Category if c.unique} == {
            Category.ELEMENT,
            Category.ID,
            Category.PSEUDO_ELEMENT,
        }

    def test_labels(self):
        assert Category.PSEUDO_CLASS.label == "pseudo-class"
        assert Category.ATTRIBUTE.render("x=1") == "[x=1]"


class TestCombinator:
    def test_known(self):
        assert all(Combinator.is_known(t) for t in (" ", "+", "~", ">"))
        assert not Combinator.is_known(">>")


class TestSelectorState:
    def test_empty(self):
        state = SelectorState()
        assert state.watermark is None
        assert state.seen == frozenset()
        assert state.text == ""

    def test_append_returns_new_state(self):
        state = SelectorState()
        after = state.append(Category.ID, "main")
        assert state.text == ""
        assert after.text == "#main"
        assert after.watermark is Category.ID
        assert after.seen == frozenset({Category.ID})

    def test_repeatable_category_keeps_watermark(self):
        state = SelectorState().append(Category.CLASS, "a").append(Category.CLASS, "b")
        assert state.watermark is Category.CLASS
        assert state.seen == frozenset()
        assert state.text == ".a.b"

    def test_duplicate_checked_before_order(self):
        state = SelectorState().append(Category.ELEMENT, "a").append(Category.ID, "x")
        with pytest.raises(DuplicateError):
            state.append(Category.ELEMENT, "b")

    def test_regression(self):
        state = SelectorState().append(Category.PSEUDO_CLASS, "hover")
        with pytest.raises(OrderError):
            state.append(Category.ATTRIBUTE, "href")

    def test_with_text_keeps_flags(self):
        state = SelectorState().append(Category.ELEMENT, "a").with_text("")
        assert state.text == ""
        assert state.watermark is Category.ELEMENT
        with pytest.raises(DuplicateError):
            state.append(Category.ELEMENT, "b")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            SelectorState().text = "x"
