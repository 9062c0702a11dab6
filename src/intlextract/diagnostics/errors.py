"""Extraction exception hierarchy with structured diagnostics.

Every fatal error aborts extraction of the current compilation unit; no
partial catalog is written for a unit that raised. All exceptions store
Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ExtractionError(Exception):
    """Base exception for all extraction errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        node: Source tree node the error is located at (optional)
    """

    def __init__(self, message: str | Diagnostic, *, node: object | None = None) -> None:
        """Initialize ExtractionError.

        Args:
            message: Error message string OR Diagnostic object
            node: Offending source tree node
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)
        self.node = node


class StaticEvaluationError(ExtractionError):
    """A required sub-expression could not be reduced to a constant.

    Example:
        <FormattedMessage id="x" defaultMessage={props.text} />
    """


class MessageSyntaxError(ExtractionError):
    """A defaultMessage failed ICU message-format validation.

    Attributes:
        parse_error: The underlying parser diagnostic text
        escaping_misuse: True when the failure comes from backslash escaping
            inside a raw JSX attribute string literal
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        node: object | None = None,
        parse_error: str = "",
        escaping_misuse: bool = False,
    ) -> None:
        """Initialize MessageSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            node: Offending source tree node
            parse_error: Underlying parser diagnostic text
            escaping_misuse: Whether the escaping-specific variant applies
        """
        super().__init__(message, node=node)
        self.parse_error = parse_error
        self.escaping_misuse = escaping_misuse


class MissingRequiredFieldError(ExtractionError):
    """Descriptor lacks an `id` or a `defaultMessage`."""


class MissingDescriptionError(ExtractionError):
    """Descriptor lacks a `description` while descriptions are enforced."""


class DuplicateIdConflictError(ExtractionError):
    """Same storage key declared twice with differing description/defaultMessage.

    Attributes:
        message_id: The conflicting storage key
    """

    def __init__(
        self, message: str | Diagnostic, *, node: object | None = None, message_id: str = ""
    ) -> None:
        """Initialize DuplicateIdConflictError.

        Args:
            message: Error message string OR Diagnostic object
            node: Offending source tree node
            message_id: The conflicting storage key
        """
        super().__init__(message, node=node)
        self.message_id = message_id


class DescriptorShapeError(ExtractionError):
    """A descriptor-defining call was not given object-literal descriptors.

    Example:
        defineMessages(messages)  # must be defineMessages({...})
    """


class TreeLoadError(ValueError):
    """Raised when a serialized source tree cannot be loaded.

    Indicates malformed host input (not a Babel AST, missing node type),
    not an extraction failure.
    """
