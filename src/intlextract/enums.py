"""Enumerations for intlextract type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ArgumentType(StrEnum):
    """Type keyword of an ICU argument element.

    StrEnum provides automatic string conversion: str(ArgumentType.PLURAL) == "plural"
    """

    NUMBER = "number"
    """Number argument: {count, number, integer}"""

    DATE = "date"
    """Date argument: {start, date, short}"""

    TIME = "time"
    """Time argument: {start, time}"""

    PLURAL = "plural"
    """Cardinal plural: {count, plural, one {# item} other {# items}}"""

    SELECTORDINAL = "selectordinal"
    """Ordinal plural: {place, selectordinal, one {#st} other {#th}}"""

    SELECT = "select"
    """Select: {gender, select, male {he} female {she} other {they}}"""


class MessageShape(StrEnum):
    """Syntactic shape a descriptor was declared with.

    StrEnum provides automatic string conversion: str(MessageShape.ELEMENT) == "element"
    """

    ELEMENT = "element"
    """Standard element: <FormattedMessage id="x" defaultMessage="..." />"""

    SHORTHAND_ELEMENT = "shorthand_element"
    """Shorthand element: <T s="..." c="..." />"""

    DESCRIPTOR_OBJECT = "descriptor_object"
    """Descriptor object passed to defineMessages({...})"""


__all__ = [
    "ArgumentType",
    "MessageShape",
]
