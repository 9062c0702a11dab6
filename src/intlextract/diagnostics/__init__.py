"""Diagnostic system for extraction errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DescriptorShapeError,
    DuplicateIdConflictError,
    ExtractionError,
    MessageSyntaxError,
    MissingDescriptionError,
    MissingRequiredFieldError,
    StaticEvaluationError,
    TreeLoadError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DescriptorShapeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateIdConflictError",
    "ErrorTemplate",
    "ExtractionError",
    "MessageSyntaxError",
    "MissingDescriptionError",
    "MissingRequiredFieldError",
    "OutputFormat",
    "SourceSpan",
    "StaticEvaluationError",
    "TreeLoadError",
]
