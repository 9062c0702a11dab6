"""Extraction configuration.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from intlextract.constants import (
    DEFAULT_COMPONENT_NAMES,
    DEFAULT_FUNCTION_NAMES,
    DEFAULT_MODULE_SOURCE_NAME,
)

__all__ = ["ExtractionOptions"]

# Option names used by the Babel plugin configuration (.babelrc).
_CAMEL_CASE_ALIASES: dict[str, str] = {
    "moduleSourceName": "module_source_name",
    "enforceDescriptions": "enforce_descriptions",
    "extractSourceLocation": "extract_source_location",
    "messagesDir": "messages_dir",
    "componentNames": "component_names",
    "functionNames": "function_names",
    "pluralLocale": "plural_locale",
}


def _name_tuple(option: str, value: Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        msg = f"{option} must be a sequence of names, not a string"
        raise ValueError(msg)  # noqa: TRY004 - configuration value error
    names = tuple(value)
    for name in names:
        if not isinstance(name, str) or not name:
            msg = f"{option} entries must be non-empty strings, got {name!r}"
            raise ValueError(msg)
    return names


@dataclass(frozen=True, slots=True)
class ExtractionOptions:
    """Immutable configuration for one extraction run.

    All fields have defaults; ``ExtractionOptions()`` extracts react-intl
    messages without writing catalog files.

    Attributes:
        module_source_name: Module whose imports identify recognized
            components and functions (default: "react-intl").
        enforce_descriptions: Require a non-empty description on every
            descriptor (default: False).
        extract_source_location: Record file, start and end of every
            descriptor in the catalog (default: False).
        messages_dir: Root directory for per-unit catalog files. None or
            an empty string disables writing; descriptors are still
            exported as metadata.
        component_names: Element components imported from the module
            source that declare messages (default: FormattedMessage and
            FormattedHTMLMessage). The react-intl Babel plugin enables no
            component by default to keep clear of the <T> shorthand; pass
            an empty tuple for that behavior.
        function_names: Functions imported from the module source that take
            an object of descriptor objects.
        plural_locale: Locale whose CLDR plural categories plural selectors
            are checked against (requires Babel). None disables the check.
        cwd: Directory catalog paths and recorded file paths are relative
            to (default: the process working directory).

    Example:
        >>> options = ExtractionOptions.from_mapping({
        ...     "messagesDir": "build/messages",
        ...     "enforceDescriptions": True,
        ... })
        >>> options.messages_dir
        PosixPath('build/messages')
    """

    module_source_name: str = DEFAULT_MODULE_SOURCE_NAME
    enforce_descriptions: bool = False
    extract_source_location: bool = False
    messages_dir: Path | None = None
    component_names: tuple[str, ...] = DEFAULT_COMPONENT_NAMES
    function_names: tuple[str, ...] = DEFAULT_FUNCTION_NAMES
    plural_locale: str | None = None
    cwd: Path | None = None

    def __post_init__(self) -> None:
        """Validate and normalize configuration values.

        Raises:
            ValueError: If module_source_name or plural_locale is empty, or
                a name list is a bare string or holds empty names.
        """
        if not self.module_source_name:
            msg = "module_source_name must be a non-empty string"
            raise ValueError(msg)
        if self.plural_locale is not None and not self.plural_locale:
            msg = "plural_locale must be a locale code or None"
            raise ValueError(msg)

        object.__setattr__(
            self, "component_names", _name_tuple("component_names", self.component_names)
        )
        object.__setattr__(
            self, "function_names", _name_tuple("function_names", self.function_names)
        )
        # An empty messages_dir ("messagesDir": "") leaves writing disabled.
        if not self.messages_dir:
            object.__setattr__(self, "messages_dir", None)
        elif not isinstance(self.messages_dir, Path):
            object.__setattr__(self, "messages_dir", Path(self.messages_dir))
        if self.cwd is not None and not isinstance(self.cwd, Path):
            object.__setattr__(self, "cwd", Path(self.cwd))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> "ExtractionOptions":
        """Build options from plugin-style configuration.

        Accepts the camelCase names of the Babel plugin options
        (``moduleSourceName``, ``messagesDir``, ...) and the snake_case
        field names.

        Raises:
            ValueError: If a key is not a known option
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, object] = {}
        unknown: list[str] = []
        for key, value in mapping.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                unknown.append(key)
        if unknown:
            msg = f"Unknown extraction option(s): {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        return cls(**kwargs)  # type: ignore[arg-type]

    @property
    def base_dir(self) -> Path:
        """Directory relative paths are computed against."""
        return self.cwd if self.cwd is not None else Path.cwd()
