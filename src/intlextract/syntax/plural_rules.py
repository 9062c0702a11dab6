"""CLDR plural category checks using Babel.

Finds plural/selectordinal options whose selector can never be chosen for a
given locale (for example ``few`` in an English message). Exact-match
selectors (``=0``) and ``other`` are always valid.

Python 3.13+. Depends on Babel for CLDR data (``intlextract[babel]``).

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from intlextract.core.babel_compat import get_locale_class, require_babel

from .ast import ArgumentElement, MessagePattern, PluralFormat, SelectFormat

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["PluralCategoryIssue", "find_unknown_plural_categories", "plural_categories"]

_OTHER = "other"


@functools.lru_cache(maxsize=128)
def _get_babel_locale(locale_code: str) -> Locale:
    """Parse a BCP-47 or POSIX locale code once and cache the Locale."""
    return get_locale_class().parse(locale_code.replace("-", "_"))


def plural_categories(locale_code: str, *, ordinal: bool = False) -> tuple[str, ...]:
    """Return the CLDR plural categories of a locale, sorted, including ``other``.

    Args:
        locale_code: Locale code (e.g., "en", "pl-PL", "ar_SA")
        ordinal: Use ordinal rules (selectordinal) instead of cardinal rules

    Returns:
        Category names, e.g. ("few", "many", "one", "other") for Polish

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If the locale is not recognized
        ValueError: If the locale code is malformed

    Example:
        >>> plural_categories("en")
        ('one', 'other')
        >>> plural_categories("en", ordinal=True)
        ('few', 'one', 'other', 'two')
    """
    require_babel("plural_categories")
    locale = _get_babel_locale(locale_code)
    rule = locale.ordinal_form if ordinal else locale.plural_form
    return tuple(sorted(set(rule.tags) | {_OTHER}))


type PluralCategoryIssue = tuple[str, str, tuple[str, ...]]
"""(argument id, offending selector, valid categories)"""


def find_unknown_plural_categories(
    pattern: MessagePattern, locale_code: str
) -> list[PluralCategoryIssue]:
    """Collect plural options whose selector is not a category of the locale.

    Walks nested select/plural options in document order.

    Args:
        pattern: Parsed message
        locale_code: Locale whose CLDR rules apply

    Returns:
        One issue per offending option, in document order
    """
    issues: list[PluralCategoryIssue] = []
    _collect(pattern, locale_code, issues)
    return issues


def _collect(pattern: MessagePattern, locale_code: str, issues: list[PluralCategoryIssue]) -> None:
    for element in pattern.elements:
        if not ArgumentElement.guard(element):
            continue
        argument_format = element.format
        if isinstance(argument_format, PluralFormat):
            categories = plural_categories(locale_code, ordinal=argument_format.ordinal)
            for option in argument_format.options:
                if not option.selector.startswith("=") and option.selector not in categories:
                    issues.append((element.id, option.selector, categories))
                _collect(option.value, locale_code, issues)
        elif isinstance(argument_format, SelectFormat):
            for option in argument_format.options:
                _collect(option.value, locale_code, issues)
