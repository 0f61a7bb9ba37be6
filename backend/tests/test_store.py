"""
Tests for SessionStore: creation, validation, defaults and deletion.
"""

import logging

import pytest

from errors import NotFoundError, ValidationError
from store import SessionStore


class TestCreate:

    def setup_method(self):
        self.store = SessionStore()

    def test_assigns_unique_ids(self):
        ids = {self.store.create("2026-01-01", "Math", 2).id for _ in range(50)}
        assert len(ids) == 50

    def test_appends_in_insertion_order(self):
        a = self.store.create("2026-01-01", "Math", 1)
        b = self.store.create("2026-01-02", "Bio", 2)
        assert [s.id for s in self.store.list()] == [a.id, b.id]

    def test_coerces_hours(self):
        assert self.store.create("2026-01-01", "Math", "3").hours == 3.0
        assert self.store.create("2026-01-01", "Math", "1.25").hours == 1.25
        assert self.store.create("2026-01-01", "Math", 0).hours == 0.0

    def test_defaults_for_missing_mood_and_productivity(self):
        s = self.store.create("2026-01-01", "Math", 2)
        assert s.mood == "neutral"
        assert s.productivity == "medium"

    def test_empty_strings_take_defaults(self):
        s = self.store.create("2026-01-01", "Math", 2, mood="", productivity="  ")
        assert s.mood == "neutral"
        assert s.productivity == "medium"

    def test_keeps_given_mood_and_productivity(self):
        s = self.store.create("2026-01-01", "Math", 2, mood="tired", productivity="high")
        assert (s.mood, s.productivity) == ("tired", "high")

    @pytest.mark.parametrize(
        "date, subject, hours",
        [
            (None, "Math", 2),
            ("", "Math", 2),
            ("2026-01-01", None, 2),
            ("2026-01-01", "", 2),
            ("2026-01-01", "   ", 2),
            ("2026-01-01", "Math", None),
        ],
    )
    def test_missing_required_fields(self, date, subject, hours):
        with pytest.raises(ValidationError) as exc:
            self.store.create(date, subject, hours)
        assert exc.value.message == "date, subject, and hours are required"
        assert exc.value.status_code == 400
        assert len(self.store) == 0

    @pytest.mark.parametrize("hours", ["abc", "", [], True, float("nan"), float("inf"), -1])
    def test_invalid_hours(self, hours):
        with pytest.raises(ValidationError):
            self.store.create("2026-01-01", "Math", hours)
        assert self.store.list() == []

    def test_empty_hours_is_not_zero(self):
        with pytest.raises(ValidationError) as exc:
            self.store.create("2026-01-01", "Math", "")
        assert exc.value.message == "hours must be a number"
        assert len(self.store) == 0

    def test_invalid_hours_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="store"):
            with pytest.raises(ValidationError):
                self.store.create("2026-01-01", "Math", -2)
        assert any(
            r.levelno == logging.WARNING and "hours must not be negative" in r.getMessage()
            for r in caplog.records
        )


class TestDelete:

    def setup_method(self):
        self.store = SessionStore()
        self.first = self.store.create("2026-01-01", "Math", 1)
        self.second = self.store.create("2026-01-02", "Bio", 2)

    def test_removes_exactly_one(self):
        removed = self.store.delete(self.first.id)
        assert removed.id == self.first.id
        assert [s.id for s in self.store.list()] == [self.second.id]

    def test_unknown_id_leaves_collection_unchanged(self):
        before = self.store.list()
        with pytest.raises(NotFoundError) as exc:
            self.store.delete("does-not-exist")
        assert exc.value.status_code == 404
        assert self.store.list() == before

    def test_second_delete_of_same_id_fails(self):
        self.store.delete(self.second.id)
        with pytest.raises(NotFoundError):
            self.store.delete(self.second.id)
        assert len(self.store) == 1

    def test_get(self):
        assert self.store.get(self.second.id) == self.second
        with pytest.raises(NotFoundError):
            self.store.get("nope")

    def test_list_is_a_copy(self):
        self.store.list().clear()
        assert len(self.store) == 2

    def test_clear(self):
        self.store.clear()
        assert self.store.list() == []
