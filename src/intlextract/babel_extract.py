"""Babel (pybabel) extraction method for Babel JSON AST files.

Lets ``pybabel extract`` build a gettext catalog from the same message
declarations the extraction engine recognizes. Registered under the
``babel.extractors`` entry point group as ``intl_ast``::

    # babel.cfg
    [intl_ast: build/ast/**.json]
    module_source_name = react-intl
    component_names = FormattedMessage FormattedHTMLMessage

Each message yields its canonical default message as the msgid. The
description and the disambiguation comment become translator comments.

Python 3.13+.
"""

import json
import logging
from collections.abc import Collection, Iterator, Mapping
from typing import IO

from intlextract.diagnostics import TreeLoadError
from intlextract.extraction import ExtractionOptions, UnitFile, extract_unit
from intlextract.tree.loader import load_program

__all__ = ["extract"]

logger = logging.getLogger(__name__)

type ExtractionResult = tuple[int, str | None, str, list[str]]

_NAME_LIST_OPTIONS = frozenset({"component_names", "function_names"})
_SUPPORTED_OPTIONS = frozenset({"module_source_name", "plural_locale"}) | _NAME_LIST_OPTIONS
_CAMEL_CASE = {
    "moduleSourceName": "module_source_name",
    "componentNames": "component_names",
    "functionNames": "function_names",
    "pluralLocale": "plural_locale",
}


def _options(options: Mapping[str, str]) -> ExtractionOptions:
    """Translate method options; catalog writing is never enabled here."""
    kwargs: dict[str, object] = {}
    for key, value in options.items():
        name = _CAMEL_CASE.get(key, key)
        if name not in _SUPPORTED_OPTIONS:
            continue
        if name in _NAME_LIST_OPTIONS:
            kwargs[name] = tuple(value.replace(",", " ").split())
        else:
            kwargs[name] = value
    return ExtractionOptions(extract_source_location=True, **kwargs)  # type: ignore[arg-type]


def extract(
    fileobj: IO[bytes],
    keywords: Collection[str],  # noqa: ARG001 - messages are found by shape, not keyword
    comment_tags: Collection[str],  # noqa: ARG001 - descriptions replace comment tags
    options: Mapping[str, str],
) -> Iterator[ExtractionResult]:
    """Extract messages from a Babel JSON AST file.

    Args:
        fileobj: Binary file object of the JSON AST
        keywords: Ignored
        comment_tags: Ignored
        options: Method options from the mapping configuration

    Yields:
        (lineno, funcname, message, comments) tuples

    Raises:
        TreeLoadError: If the file is not a Babel JSON AST
        ExtractionError: On the first invalid message declaration
    """
    filename = str(getattr(fileobj, "name", "<ast>"))
    encoding = options.get("encoding", "utf-8")
    try:
        data = json.loads(fileobj.read().decode(encoding))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"{filename}: not a JSON AST ({e})"
        raise TreeLoadError(msg) from e

    program = load_program(data)
    result = extract_unit(program, UnitFile(filename=filename), _options(options))

    for message in result.messages:
        comments: list[str] = []
        if message.description:
            comments.append(message.description)
        if message.comment:
            comments.append(f"context: {message.comment}")
        lineno = message.location.start.line if message.location is not None else 0
        yield lineno, None, message.default_message, comments
    logger.debug("Extracted %d message(s) from %s for Babel", len(result.messages), filename)
