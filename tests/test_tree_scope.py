"""Tests for tree/scope.py: module-level import bindings.

Python 3.13+.
"""

from __future__ import annotations

from intlextract.tree import (
    Identifier,
    ImportDeclaration,
    ImportNamespaceSpecifier,
    ImportScope,
    ImportSpecifier,
    JSXIdentifier,
    JSXMemberExpression,
    StringLiteral,
)
from intlextract.tree.scope import DEFAULT_EXPORT, NAMESPACE_EXPORT
from tests.helpers.tree import ident, import_from, program


class TestBindings:
    """Collecting import bindings."""

    def test_named_imports(self) -> None:
        """Named imports bind their local name."""
        scope = ImportScope.from_program(
            program(import_from("react-intl", "FormattedMessage", "defineMessages"))
        )
        binding = scope.lookup("FormattedMessage")
        assert binding is not None
        assert (binding.module, binding.imported) == ("react-intl", "FormattedMessage")
        assert scope.lookup("defineMessages") is not None

    def test_renamed_import(self) -> None:
        """import {X as Y} binds Y to X."""
        scope = ImportScope.from_program(program(import_from("react-intl", "FormattedMessage as Msg")))
        assert scope.lookup("FormattedMessage") is None
        binding = scope.lookup("Msg")
        assert binding is not None
        assert binding.imported == "FormattedMessage"

    def test_default_and_namespace_imports(self) -> None:
        """Default and namespace imports use sentinel export names."""
        namespace = ImportDeclaration(
            specifiers=[ImportNamespaceSpecifier(local=Identifier("Intl"))],
            source=StringLiteral("react-intl"),
        )
        scope = ImportScope.from_program(program(import_from("react", default="React"), namespace))
        react = scope.lookup("React")
        intl = scope.lookup("Intl")
        assert react is not None
        assert react.imported == DEFAULT_EXPORT
        assert intl is not None
        assert intl.imported == NAMESPACE_EXPORT

    def test_string_imported_name(self) -> None:
        """import {"name" as local} uses the string value."""
        declaration = ImportDeclaration(
            specifiers=[ImportSpecifier(local=Identifier("Msg"), imported=StringLiteral("FormattedMessage"))],
            source=StringLiteral("react-intl"),
        )
        scope = ImportScope.from_program(program(declaration))
        binding = scope.lookup("Msg")
        assert binding is not None
        assert binding.imported == "FormattedMessage"

    def test_non_import_statements_ignored(self) -> None:
        """Only import declarations bind names."""
        scope = ImportScope.from_program(program(ident("FormattedMessage")))
        assert scope.bindings == {}


class TestReferencesImport:
    """references_import answers the extraction engine's question."""

    def _scope(self) -> ImportScope:
        return ImportScope.from_program(
            program(
                import_from("react-intl", "FormattedMessage as Msg", "defineMessages"),
                import_from("other-lib", "FormattedPlural"),
            )
        )

    def test_jsx_identifier_matches_renamed_import(self) -> None:
        """A renamed component still references its export."""
        assert self._scope().references_import(JSXIdentifier("Msg"), "react-intl", "FormattedMessage")

    def test_identifier_matches(self) -> None:
        """Identifiers are resolved the same way."""
        assert self._scope().references_import(Identifier("defineMessages"), "react-intl", "defineMessages")

    def test_wrong_module(self) -> None:
        """The module must match."""
        scope = self._scope()
        assert not scope.references_import(JSXIdentifier("FormattedPlural"), "react-intl", "FormattedPlural")

    def test_unbound_name(self) -> None:
        """A name that was never imported references nothing."""
        assert not self._scope().references_import(
            JSXIdentifier("FormattedMessage"), "react-intl", "FormattedMessage"
        )

    def test_member_expression_never_matches(self) -> None:
        """Only plain identifiers are resolved."""
        node = JSXMemberExpression(object=JSXIdentifier("Msg"), property=JSXIdentifier("X"))
        assert not self._scope().references_import(node, "react-intl", "FormattedMessage")
