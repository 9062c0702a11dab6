"""Tests for babel_extract.py: the pybabel extraction method.

Python 3.13+.
"""

from __future__ import annotations

import io
import json

import pytest

from intlextract.babel_extract import extract
from intlextract.diagnostics import MessageSyntaxError, TreeLoadError
from tests.helpers.tree import raw_file, raw_import, raw_jsx


def _fileobj(*body: dict[str, object]) -> io.BytesIO:
    return io.BytesIO(json.dumps(raw_file(*body)).encode("utf-8"))


class TestExtract:
    """(lineno, funcname, message, comments) tuples."""

    def test_messages_with_comments(self) -> None:
        """Descriptions and disambiguation comments become translator comments."""
        fileobj = _fileobj(
            raw_import("react-intl", "FormattedMessage"),
            raw_jsx(
                "FormattedMessage",
                {"id": "greeting", "description": "greets user", "defaultMessage": "Hi {name}"},
                line=2,
            ),
            raw_jsx("T", {"s": "Save", "c": "button"}, line=5),
        )
        assert list(extract(fileobj, (), (), {})) == [
            (2, None, "Hi {name}", ["greets user"]),
            (5, None, "Save", ["context: button"]),
        ]

    def test_canonical_message(self) -> None:
        """The msgid is the canonical message."""
        fileobj = _fileobj(raw_jsx("T", {"s": "{n,plural,one{# item}other{# items}}"}, line=1))
        assert [message for _, _, message, _ in extract(fileobj, (), (), {})] == [
            "{n, plural, one {# item} other {# items}}"
        ]

    def test_name_list_options(self) -> None:
        """Name lists are split on whitespace or commas."""
        fileobj = _fileobj(
            raw_import("my-intl", "Text", "Label"),
            raw_jsx("Text", {"id": "a", "defaultMessage": "A"}, line=2),
            raw_jsx("Label", {"id": "b", "defaultMessage": "B"}, line=3),
        )
        options = {"moduleSourceName": "my-intl", "component_names": "Text, Label"}
        assert [message for _, _, message, _ in extract(fileobj, (), (), options)] == ["A", "B"]

    def test_unknown_options_ignored(self) -> None:
        """Options meant for other methods do not fail extraction."""
        fileobj = _fileobj(raw_jsx("T", {"s": "Hi"}))
        assert len(list(extract(fileobj, (), (), {"silent": "false"}))) == 1

    def test_invalid_json(self) -> None:
        """Non-JSON input raises TreeLoadError naming the file."""
        with pytest.raises(TreeLoadError, match="<ast>"):
            list(extract(io.BytesIO(b"{not json"), (), (), {}))

    def test_invalid_message(self) -> None:
        """Invalid declarations propagate."""
        with pytest.raises(MessageSyntaxError):
            list(extract(_fileobj(raw_jsx("T", {"s": "{oops"})), (), (), {}))
