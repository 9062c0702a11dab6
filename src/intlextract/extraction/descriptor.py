"""Message descriptors and raw descriptor construction.

A message is declared in one of four shapes:

- standard element: ``<FormattedMessage id="..." description="..." defaultMessage="..." />``
- shorthand element: ``<T s="Hello, {name}!" c="greeting" />``
- translate call: ``t("Hello, {name}!", values, "greeting")``
- descriptor object: ``defineMessages({hello: {id: "...", defaultMessage: "..."}})``

Element attributes and object properties are first collected into a
RawDescriptor (recognized property name -> unresolved value node), then
resolved into a MessageDescriptor.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from intlextract.constants import (
    DESCRIPTOR_PROPS,
    SHORTHAND_COMMENT_PROPERTY,
    SHORTHAND_MESSAGE_PROPERTY,
)
from intlextract.enums import MessageShape
from intlextract.tree.nodes import Node, Position

__all__ = [
    "COMMENT_KEY",
    "DEFAULT_MESSAGE_KEY",
    "DESCRIPTION_KEY",
    "ID_KEY",
    "MessageDescriptor",
    "RawDescriptor",
    "SourceLocation",
    "build_raw_descriptor",
]

ID_KEY = "id"
DESCRIPTION_KEY = "description"
DEFAULT_MESSAGE_KEY = "defaultMessage"
COMMENT_KEY = SHORTHAND_COMMENT_PROPERTY

type RawDescriptor = dict[str, Node]
"""Recognized property name -> unresolved value node. Never persisted."""


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a descriptor was declared.

    Attributes:
        file: Unit path relative to the working directory
        start: Start of the declaring node (1-indexed line, 0-indexed column)
        end: End of the declaring node
    """

    file: str
    start: Position
    end: Position

    def to_dict(self) -> dict[str, object]:
        """Serialize as the ``file``/``start``/``end`` catalog fields."""
        return {
            "file": self.file,
            "start": {"line": self.start.line, "column": self.start.column},
            "end": {"line": self.end.line, "column": self.end.column},
        }


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """A resolved, validated message.

    Attributes:
        id: Storage key; "<id>##<comment>" when declared with a comment
        default_message: Canonical ICU message text
        description: Context for translators (optional)
        location: Declaration site, when source locations are extracted
        comment: Disambiguation comment folded into the id (not persisted
            separately)
    """

    id: str
    default_message: str
    description: str | None = None
    location: SourceLocation | None = None
    comment: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialize as a catalog record.

        Example:
            >>> MessageDescriptor(id="hi", default_message="Hi!").to_dict()
            {'id': 'hi', 'defaultMessage': 'Hi!'}
        """
        record: dict[str, object] = {ID_KEY: self.id}
        if self.description is not None:
            record[DESCRIPTION_KEY] = self.description
        record[DEFAULT_MESSAGE_KEY] = self.default_message
        if self.location is not None:
            record.update(self.location.to_dict())
        return record


def build_raw_descriptor(
    properties: Iterable[tuple[Node, Node]],
    key_of: Callable[[Node], object],
    *,
    shape: MessageShape = MessageShape.ELEMENT,
) -> RawDescriptor:
    """Collect the recognized properties of a message declaration.

    Later properties with the same name replace earlier ones.

    Args:
        properties: (key node, value node) pairs in source order
        key_of: Resolves a key node to its name (identifiers give their
            name, other keys are statically evaluated)
        shape: Declaration shape; the shorthand element maps ``s`` to both
            ``id`` and ``defaultMessage`` and ``c`` to the comment, every
            other shape keeps ``id``, ``description`` and ``defaultMessage``

    Returns:
        RawDescriptor of unresolved value nodes
    """
    descriptor: RawDescriptor = {}
    for key_node, value_node in properties:
        key = key_of(key_node)
        if shape is MessageShape.SHORTHAND_ELEMENT:
            if key == SHORTHAND_MESSAGE_PROPERTY:
                descriptor[ID_KEY] = value_node
                descriptor[DEFAULT_MESSAGE_KEY] = value_node
            elif key == SHORTHAND_COMMENT_PROPERTY:
                descriptor[COMMENT_KEY] = value_node
        elif isinstance(key, str) and key in DESCRIPTOR_PROPS:
            descriptor[key] = value_node
    return descriptor
