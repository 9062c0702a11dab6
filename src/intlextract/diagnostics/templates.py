"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistently formatted, and documents every
    error case in one place.
    """

    _MESSAGE_SYNTAX_URL = "https://formatjs.io/docs/core-concepts/icu-syntax/"
    _JSX_GOTCHAS_URL = "https://legacy.reactjs.org/docs/jsx-in-depth.html#string-literals"

    @staticmethod
    def not_statically_evaluable() -> Diagnostic:
        """Message value cannot be reduced to a constant at build time.

        Returns:
            Diagnostic for STATIC_EVALUATION_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.STATIC_EVALUATION_FAILED,
            message="Messages must be statically evaluate-able for extraction.",
            hint="Use string literals (or concatenations of literals) for message values",
        )

    @staticmethod
    def message_parse_failed(parse_error: str) -> Diagnostic:
        """defaultMessage is not valid ICU message syntax.

        Args:
            parse_error: Position-aware diagnostic from the ICU parser

        Returns:
            Diagnostic for MESSAGE_SYNTAX_INVALID
        """
        msg = f"Message failed to parse.\n{parse_error}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_SYNTAX_INVALID,
            message=msg,
            hint="Check that every '{' has a matching '}' and arguments are well formed",
            help_url=ErrorTemplate._MESSAGE_SYNTAX_URL,
            detail=parse_error,
        )

    @staticmethod
    def message_escaping_invalid(parse_error: str) -> Diagnostic:
        """Backslash escaping used inside a raw JSX attribute string.

        Args:
            parse_error: Position-aware diagnostic from the ICU parser

        Returns:
            Diagnostic for MESSAGE_ESCAPING_INVALID
        """
        msg = (
            "Message failed to parse. "
            "It looks like `\\`s were used for escaping, "
            "this won't work with JSX string literals. "
            "Wrap with `{}`."
        )
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_ESCAPING_INVALID,
            message=msg,
            hint='Write the attribute as defaultMessage={"..."} so escapes are interpreted',
            help_url=ErrorTemplate._JSX_GOTCHAS_URL,
            detail=parse_error,
        )

    @staticmethod
    def message_too_large(size: int, max_size: int) -> Diagnostic:
        """Message text exceeds the parser input limit.

        Returns:
            Diagnostic for MESSAGE_TOO_LARGE
        """
        msg = f"Message text is {size} characters, exceeding the limit of {max_size}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_TOO_LARGE,
            message=msg,
            hint="Split the text into several messages",
        )

    @staticmethod
    def descriptor_fields_missing() -> Diagnostic:
        """Descriptor lacks id or defaultMessage.

        Returns:
            Diagnostic for DESCRIPTOR_FIELDS_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_FIELDS_MISSING,
            message="Message Descriptors require an `id` and `defaultMessage`.",
            hint="Provide both a non-empty id and a non-empty defaultMessage",
        )

    @staticmethod
    def description_missing() -> Diagnostic:
        """Descriptor lacks a description while descriptions are enforced.

        Returns:
            Diagnostic for DESCRIPTION_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTION_MISSING,
            message="Message must have a `description`.",
            hint="Describe the context of the message for translators",
        )

    @staticmethod
    def duplicate_message_id(message_id: str) -> Diagnostic:
        """Same id declared with different description/defaultMessage.

        Args:
            message_id: The conflicting storage key

        Returns:
            Diagnostic for DUPLICATE_ID_CONFLICT
        """
        msg = (
            f'Duplicate message id: "{message_id}", '
            "but the `description` and/or `defaultMessage` are different."
        )
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ID_CONFLICT,
            message=msg,
            hint="Give each distinct message its own id, or add a disambiguating comment",
        )

    @staticmethod
    def descriptor_shape_invalid(function_name: str) -> Diagnostic:
        """Descriptor-defining call not given object-literal descriptors.

        Args:
            function_name: Name the callee was imported as

        Returns:
            Diagnostic for DESCRIPTOR_SHAPE_INVALID
        """
        msg = (
            f"`{function_name}()` must be called with an object expression with values "
            "that are Message Descriptors, also defined as object expressions."
        )
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_SHAPE_INVALID,
            message=msg,
            hint="Inline the descriptors as object literals in the call",
        )

    @staticmethod
    def unsupported_component(component: str, line: int) -> Diagnostic:
        """Recognized component from which messages are not extracted.

        Args:
            component: Component name (e.g., FormattedPlural)
            line: Line of the element in the unit

        Returns:
            Warning diagnostic for UNSUPPORTED_COMPONENT
        """
        msg = (
            f"Line {line}: Default messages are not extracted from "
            f"<{component}>, use <FormattedMessage> instead."
        )
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_COMPONENT,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def plural_category_unknown(
        selector: str, locale: str, categories: tuple[str, ...]
    ) -> Diagnostic:
        """Plural option selector is not a CLDR category of the locale.

        Args:
            selector: The offending option selector
            locale: Locale the categories were taken from
            categories: Valid categories for the locale

        Returns:
            Warning diagnostic for PLURAL_CATEGORY_UNKNOWN
        """
        valid = ", ".join(categories)
        msg = f"Plural category '{selector}' is never selected for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_UNKNOWN,
            message=msg,
            hint=f"Use one of: {valid}, or an exact match like '=0'",
            severity="warning",
        )

    @staticmethod
    def tree_node_invalid(reason: str) -> Diagnostic:
        """Serialized source tree is malformed.

        Args:
            reason: What is wrong with the node

        Returns:
            Diagnostic for TREE_NODE_INVALID
        """
        msg = f"Invalid source tree: {reason}"
        return Diagnostic(code=DiagnosticCode.TREE_NODE_INVALID, message=msg)

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum nesting depth exceeded.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting depth",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input during parsing.

        Args:
            position: Position in source where EOF was encountered

        Returns:
            Diagnostic for MESSAGE_SYNTAX_INVALID
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(code=DiagnosticCode.MESSAGE_SYNTAX_INVALID, message=msg)
