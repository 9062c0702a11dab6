"""Catalog emission at the end of a unit.

Exports the unit's descriptors as unit metadata and, when a messages
directory is configured, writes them to a per-unit JSON catalog that mirrors
the source tree::

    <messages_dir>/<dirname of unit relative to cwd>/<unit basename>.json

Python 3.13+.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from intlextract.constants import CATALOG_INDENT, CATALOG_SUFFIX, METADATA_KEY
from intlextract.diagnostics import Diagnostic

from .descriptor import MessageDescriptor
from .host import UnitFile
from .options import ExtractionOptions
from .state import ExtractionState

__all__ = ["CatalogEmitter", "UnitResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UnitResult:
    """Outcome of extracting one unit.

    Attributes:
        metadata: Unit metadata: ``{"react-intl": {"messages": [...]}}``
        messages: Extracted descriptors in first-seen order
        warnings: Non-fatal diagnostics in document order
        catalog_path: Catalog file written, or None
    """

    metadata: dict[str, object]
    messages: tuple[MessageDescriptor, ...]
    warnings: tuple[Diagnostic, ...] = ()
    catalog_path: Path | None = None

    @property
    def records(self) -> list[dict[str, object]]:
        """Catalog records of the extracted descriptors."""
        return [message.to_dict() for message in self.messages]


class CatalogEmitter:
    """Writes per-unit catalogs.

    Args:
        options: Extraction configuration (messages_dir, cwd)
    """

    __slots__ = ("_options",)

    def __init__(self, options: ExtractionOptions) -> None:
        self._options = options

    def catalog_path(self, unit: UnitFile) -> Path:
        """Catalog file of a unit.

        The unit's directory is taken relative to the working directory;
        parent references are dropped so the catalog always lands inside
        messages_dir.

        Raises:
            ValueError: If no messages directory is configured
        """
        messages_dir = self._options.messages_dir
        if messages_dir is None:
            msg = "messages_dir is not configured"
            raise ValueError(msg)
        relative = unit.relative_path(self._options.base_dir)
        parts = [part for part in relative.parent.parts if part not in {"..", "."}]
        return messages_dir.joinpath(*parts, unit.basename + CATALOG_SUFFIX)

    def emit(self, state: ExtractionState) -> UnitResult:
        """Export a finished unit's descriptors and write its catalog.

        A catalog is written only when messages_dir is set and the unit
        declared at least one message.
        """
        messages = tuple(state.store.messages)
        records = [message.to_dict() for message in messages]
        metadata: dict[str, object] = {METADATA_KEY: {"messages": records}}

        catalog_path: Path | None = None
        if self._options.messages_dir is not None and records:
            catalog_path = self.catalog_path(state.unit)
            catalog_path.parent.mkdir(parents=True, exist_ok=True)
            catalog_path.write_text(
                json.dumps(records, indent=CATALOG_INDENT, ensure_ascii=False),
                encoding="utf-8",
            )
            logger.debug("Wrote %d message(s) to %s", len(records), catalog_path)

        return UnitResult(
            metadata=metadata,
            messages=messages,
            warnings=tuple(state.warnings),
            catalog_path=catalog_path,
        )
