"""Tests for extraction/store.py: per-unit deduplication and validation.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intlextract.diagnostics import (
    DuplicateIdConflictError,
    MissingDescriptionError,
    MissingRequiredFieldError,
)
from intlextract.extraction import ExtractionStore, UnitFile, storage_key
from intlextract.tree import Position
from tests.helpers.tree import lit
from tests.strategies.tree import descriptor_texts, message_ids


def _store(**kwargs: object) -> ExtractionStore:
    return ExtractionStore(unit=UnitFile("src/App.js"), **kwargs)  # type: ignore[arg-type]


class TestStorageKey:
    """id or id##comment."""

    def test_without_comment(self) -> None:
        """No comment keeps the id."""
        assert storage_key("Save", None) == "Save"
        assert storage_key("Save", "") == "Save"

    def test_with_comment(self) -> None:
        """A comment is appended after ##."""
        assert storage_key("Save", "button") == "Save##button"


class TestValidation:
    """Checks run in a fixed order."""

    @pytest.mark.parametrize(
        "descriptor",
        [{}, {"id": "a"}, {"defaultMessage": "b"}, {"id": "", "defaultMessage": "b"}],
    )
    def test_missing_required_fields(self, descriptor: dict[str, str]) -> None:
        """id and defaultMessage must both be non-empty."""
        with pytest.raises(MissingRequiredFieldError):
            _store().store(descriptor, lit("x"))

    def test_description_enforced(self) -> None:
        """enforce_descriptions requires a description."""
        with pytest.raises(MissingDescriptionError):
            _store(enforce_descriptions=True).store({"id": "a", "defaultMessage": "b"}, lit("x"))

    def test_description_optional_by_default(self) -> None:
        """Without enforcement a missing description is fine."""
        stored = _store().store({"id": "a", "defaultMessage": "b"}, lit("x"))
        assert stored.description is None

    def test_required_fields_checked_before_description(self) -> None:
        """A descriptor lacking both fails on the required fields."""
        with pytest.raises(MissingRequiredFieldError):
            _store(enforce_descriptions=True).store({"id": "a"}, lit("x"))


class TestDeduplication:
    """Storage key conflicts."""

    def test_identical_redeclaration_collapses(self) -> None:
        """The same descriptor twice is stored once."""
        store = _store()
        descriptor = {"id": "a", "description": "d", "defaultMessage": "m"}
        store.store(descriptor, lit("x"))
        store.store(dict(descriptor), lit("y"))
        assert len(store) == 1

    def test_differing_message_conflicts(self) -> None:
        """Same id with another defaultMessage raises."""
        store = _store()
        store.store({"id": "a", "defaultMessage": "m1"}, lit("x"))
        with pytest.raises(DuplicateIdConflictError) as exc_info:
            store.store({"id": "a", "defaultMessage": "m2"}, lit("y", line=5))
        assert exc_info.value.message_id == "a"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.span is not None
        assert exc_info.value.diagnostic.span.line == 5

    def test_differing_description_conflicts(self) -> None:
        """Same id with another description raises."""
        store = _store()
        store.store({"id": "a", "description": "d1", "defaultMessage": "m"}, lit("x"))
        with pytest.raises(DuplicateIdConflictError):
            store.store({"id": "a", "description": "d2", "defaultMessage": "m"}, lit("y"))

    def test_comment_separates_entries(self) -> None:
        """X and X##foo are distinct keys; the mangled key is the stored id."""
        store = _store()
        store.store({"id": "X", "defaultMessage": "X"}, lit("x"))
        stored = store.store({"id": "X", "defaultMessage": "X", "c": "foo"}, lit("y"))
        assert stored.id == "X##foo"
        assert stored.comment == "foo"
        assert [m.id for m in store.messages] == ["X", "X##foo"]
        assert "X##foo" in store

    def test_first_seen_order_kept(self) -> None:
        """Redeclaring an earlier key does not move it."""
        store = _store()
        store.store({"id": "a", "defaultMessage": "1"}, lit("x"))
        store.store({"id": "b", "defaultMessage": "2"}, lit("x"))
        store.store({"id": "a", "defaultMessage": "1"}, lit("x"))
        assert [m.id for m in store.messages] == ["a", "b"]

    @given(st.lists(st.tuples(message_ids, descriptor_texts), max_size=8, unique_by=lambda p: p[0]))
    def test_distinct_ids_all_stored(self, pairs: list[tuple[str, str]]) -> None:
        """Distinct ids give one entry each, in insertion order."""
        store = _store()
        for message_id, message in pairs:
            store.store({"id": message_id, "defaultMessage": message}, lit("x"))
        assert [m.id for m in store.messages] == [message_id for message_id, _ in pairs]


class TestSourceLocation:
    """Optional declaration sites."""

    def test_location_off_by_default(self) -> None:
        """No location unless requested."""
        assert _store().store({"id": "a", "defaultMessage": "b"}, lit("x")).location is None

    def test_location_relative_to_base_dir(self, tmp_path: Path) -> None:
        """The file path is relative to base_dir and uses forward slashes."""
        store = ExtractionStore(
            unit=UnitFile(str(tmp_path / "src" / "App.js")),
            extract_source_location=True,
            base_dir=tmp_path,
        )
        stored = store.store({"id": "a", "defaultMessage": "b"}, lit("x", line=7))
        assert stored.location is not None
        assert stored.location.file == "src/App.js"
        assert stored.location.start == Position(7, 0)
        assert stored.location.end == Position(7, 10)
