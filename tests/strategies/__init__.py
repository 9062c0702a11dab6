"""Hypothesis strategies for intlextract property-based testing.

- icu: ICU message text in the intl-messageformat-parser dialect
- tree: descriptor values and message declarations for extraction

Usage:
    from tests.strategies.icu import icu_messages
    from tests.strategies.tree import message_ids
"""

from .icu import icu_arguments, icu_messages, icu_text
from .tree import descriptor_texts, message_ids

__all__ = [
    "descriptor_texts",
    "icu_arguments",
    "icu_messages",
    "icu_text",
    "message_ids",
]
