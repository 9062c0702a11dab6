"""intlextract - Build-time extraction of react-intl style message descriptors.

Statically finds the messages a JavaScript/JSX program declares, validates
their ICU message syntax, deduplicates them per compilation unit and emits a
JSON catalog per unit.

Public API:
    extract_unit - Extract messages from a loaded source tree
    extract_file - Extract messages from a Babel JSON AST file
    ExtractionOptions - Extraction configuration
    UnitFile - Compilation unit metadata
    UnitResult - Extracted descriptors, warnings and catalog path
    MessageDescriptor - One extracted message
    print_icu_message - Validate and canonicalize ICU message text
    load_program - Load a Babel JSON AST

Exceptions:
    ExtractionError - Base exception class
    StaticEvaluationError - Message value is not a build-time constant
    MessageSyntaxError - Invalid ICU message syntax
    MissingRequiredFieldError - Descriptor without id or defaultMessage
    MissingDescriptionError - Descriptor without description (when enforced)
    DuplicateIdConflictError - Conflicting declarations of one id
    DescriptorShapeError - defineMessages() without object literals
    TreeLoadError - Malformed Babel JSON AST

Submodules:
    intlextract.syntax - ICU message parser, AST and canonical serializer
    intlextract.tree - Reference host: tree model, loader, scope, evaluator, walker
    intlextract.extraction - Extraction engine and host capabilities
    intlextract.diagnostics - Diagnostics, error types and formatting
    intlextract.babel_extract - pybabel extraction method
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    DescriptorShapeError,
    DuplicateIdConflictError,
    ExtractionError,
    MessageSyntaxError,
    MissingDescriptionError,
    MissingRequiredFieldError,
    StaticEvaluationError,
    TreeLoadError,
)
from .extraction import (
    ExtractionOptions,
    MessageDescriptor,
    UnitFile,
    UnitResult,
    extract_file,
    extract_unit,
)
from .syntax import print_icu_message
from .tree import load_program

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intlextract")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DescriptorShapeError",
    "DuplicateIdConflictError",
    "ExtractionError",
    "ExtractionOptions",
    "MessageDescriptor",
    "MessageSyntaxError",
    "MissingDescriptionError",
    "MissingRequiredFieldError",
    "StaticEvaluationError",
    "TreeLoadError",
    "UnitFile",
    "UnitResult",
    "__version__",
    "extract_file",
    "extract_unit",
    "load_program",
    "print_icu_message",
]
