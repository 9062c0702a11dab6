"""Shared constants for intlextract.

Centralized configuration constants used across the syntax, tree and
extraction packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Recognized shapes: module, component and function names the dispatcher matches
- Shorthand shapes: the ``<T s=... c=...>`` element and ``t(...)`` call
- Catalog output: metadata key, storage key separator, file suffix
- Depth limits: Recursion protection for parsing/serialization/traversal
- Input limits: Size constraints on message text

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Recognized shapes
    "DEFAULT_MODULE_SOURCE_NAME",
    "DEFAULT_COMPONENT_NAMES",
    "DEFAULT_FUNCTION_NAMES",
    "PLURAL_COMPONENT_NAME",
    "DESCRIPTOR_PROPS",
    # Shorthand shapes
    "SHORTHAND_COMPONENT_NAME",
    "SHORTHAND_MESSAGE_PROPERTY",
    "SHORTHAND_COMMENT_PROPERTY",
    "TRANSLATE_FUNCTION_NAME",
    # Catalog output
    "METADATA_KEY",
    "COMMENT_SEPARATOR",
    "CATALOG_SUFFIX",
    "CATALOG_INDENT",
    # Depth limits
    "MAX_DEPTH",
    "MAX_TREE_DEPTH",
    # Input limits
    "MAX_MESSAGE_SIZE",
]

# ============================================================================
# RECOGNIZED SHAPES
# ============================================================================

# Module whose exports identify recognized element components and
# descriptor-defining functions.
DEFAULT_MODULE_SOURCE_NAME: str = "react-intl"

# Element components imported from the module source that declare a message
# through id/description/defaultMessage attributes.
DEFAULT_COMPONENT_NAMES: tuple[str, ...] = ("FormattedMessage", "FormattedHTMLMessage")

# Functions imported from the module source that take an object of
# descriptor objects: defineMessages({greeting: {id, defaultMessage}}).
DEFAULT_FUNCTION_NAMES: tuple[str, ...] = ("defineMessages",)

# Recognized but unsupported: default messages are not extracted from it.
PLURAL_COMPONENT_NAME: str = "FormattedPlural"

# Property names retained verbatim from standard elements and descriptor objects.
DESCRIPTOR_PROPS: frozenset[str] = frozenset({"id", "description", "defaultMessage"})

# ============================================================================
# SHORTHAND SHAPES
# ============================================================================

# <T s="Hello, {name}!" c="greeting" />
SHORTHAND_COMPONENT_NAME: str = "T"
SHORTHAND_MESSAGE_PROPERTY: str = "s"
SHORTHAND_COMMENT_PROPERTY: str = "c"

# t("Hello, {name}!", {name}, "greeting")
TRANSLATE_FUNCTION_NAME: str = "t"

# ============================================================================
# CATALOG OUTPUT
# ============================================================================

# Key under which a unit's descriptors are exported in the unit metadata.
METADATA_KEY: str = "react-intl"

# Storage key for a commented descriptor: "<id>##<comment>".
COMMENT_SEPARATOR: str = "##"

# Catalog file name: "<unit basename>.json".
CATALOG_SUFFIX: str = ".json"

# Catalog files are pretty-printed with 2-space indentation.
CATALOG_INDENT: int = 2

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: ICU parser (nested plural/select options) and serializer.
# Real messages nest two or three levels; 100 levels is malformed input.
MAX_DEPTH: int = 100

# Source trees nest far deeper than messages (every JSX child, block and
# function adds levels). Each level costs a few interpreter frames, so the
# limit stays well below the default recursion limit.
MAX_TREE_DEPTH: int = 250

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum message text length accepted by the ICU parser (in characters).
# Default: 1 MiB of text, far beyond any user-facing string.
MAX_MESSAGE_SIZE: int = 1024 * 1024
