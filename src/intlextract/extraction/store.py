"""Per-unit descriptor store.

Deduplicates descriptors by storage key and preserves first-seen order.
Every occurrence of a storage key must agree exactly on ``description`` and
``defaultMessage``; an identical redeclaration is accepted silently.

Python 3.13+.
"""

import logging
from pathlib import Path

from intlextract.constants import COMMENT_SEPARATOR
from intlextract.diagnostics import (
    DuplicateIdConflictError,
    ErrorTemplate,
    MissingDescriptionError,
    MissingRequiredFieldError,
)
from intlextract.tree.nodes import Node

from .descriptor import (
    COMMENT_KEY,
    DEFAULT_MESSAGE_KEY,
    DESCRIPTION_KEY,
    ID_KEY,
    MessageDescriptor,
    SourceLocation,
)
from .host import UnitFile, locate
from .resolver import ResolvedDescriptor

__all__ = ["ExtractionStore", "storage_key"]

logger = logging.getLogger(__name__)


def storage_key(message_id: str, comment: str | None) -> str:
    """Key a descriptor is stored under: ``id`` or ``id##comment``.

    Example:
        >>> storage_key("Save", "button")
        'Save##button'
        >>> storage_key("Save", None)
        'Save'
    """
    if comment:
        return f"{message_id}{COMMENT_SEPARATOR}{comment}"
    return message_id


class ExtractionStore:
    """Ordered mapping of storage key -> MessageDescriptor for one unit.

    Args:
        unit: Unit being processed (locates diagnostics and source locations)
        enforce_descriptions: Reject descriptors without a description
        extract_source_location: Record where each descriptor was declared
        base_dir: Directory recorded file paths are relative to
    """

    __slots__ = (
        "_base_dir",
        "_enforce_descriptions",
        "_extract_source_location",
        "_messages",
        "_unit",
    )

    def __init__(
        self,
        *,
        unit: UnitFile | None = None,
        enforce_descriptions: bool = False,
        extract_source_location: bool = False,
        base_dir: Path | None = None,
    ) -> None:
        self._unit = unit
        self._enforce_descriptions = enforce_descriptions
        self._extract_source_location = extract_source_location
        self._base_dir = base_dir
        self._messages: dict[str, MessageDescriptor] = {}

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def get(self, key: str) -> MessageDescriptor | None:
        """Descriptor stored under a key."""
        return self._messages.get(key)

    @property
    def messages(self) -> list[MessageDescriptor]:
        """Stored descriptors in first-seen order."""
        return list(self._messages.values())

    def store(self, descriptor: ResolvedDescriptor, node: Node) -> MessageDescriptor:
        """Validate and store a resolved descriptor.

        Checks, in order: required fields, description (when enforced),
        conflict with an earlier occurrence of the same storage key.

        Args:
            descriptor: Resolved ``id``/``description``/``defaultMessage``/``c``
            node: Declaring node (locates diagnostics and source locations)

        Returns:
            The stored MessageDescriptor

        Raises:
            MissingRequiredFieldError: If ``id`` or ``defaultMessage`` is empty
            MissingDescriptionError: If descriptions are enforced and missing
            DuplicateIdConflictError: If the key was stored with a different
                description or defaultMessage
        """
        message_id = descriptor.get(ID_KEY)
        default_message = descriptor.get(DEFAULT_MESSAGE_KEY)
        description = descriptor.get(DESCRIPTION_KEY)

        if not message_id or not default_message:
            diagnostic = locate(ErrorTemplate.descriptor_fields_missing(), node, self._unit)
            raise MissingRequiredFieldError(diagnostic, node=node)

        if self._enforce_descriptions and not description:
            diagnostic = locate(ErrorTemplate.description_missing(), node, self._unit)
            raise MissingDescriptionError(diagnostic, node=node)

        comment = descriptor.get(COMMENT_KEY) or None
        key = storage_key(message_id, comment)

        existing = self._messages.get(key)
        if existing is not None and (
            existing.description != description or existing.default_message != default_message
        ):
            diagnostic = locate(ErrorTemplate.duplicate_message_id(key), node, self._unit)
            raise DuplicateIdConflictError(diagnostic, node=node, message_id=key)

        stored = MessageDescriptor(
            id=key,
            default_message=default_message,
            description=description,
            location=self._location(node),
            comment=comment,
        )
        # Reassigning an existing key keeps its first-seen position.
        self._messages[key] = stored
        logger.debug("Stored message %r", key)
        return stored

    def _location(self, node: Node) -> SourceLocation | None:
        if not self._extract_source_location or node.loc is None or self._unit is None:
            return None
        base_dir = self._base_dir if self._base_dir is not None else Path.cwd()
        return SourceLocation(
            file=self._unit.relative_path(base_dir).as_posix(),
            start=node.loc.start,
            end=node.loc.end,
        )
