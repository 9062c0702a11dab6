"""Module-level import bindings.

Answers whether an identifier refers to a specific export of a specific
module, the question the extraction engine asks to recognize components and
descriptor-defining functions regardless of local renaming::

    import {FormattedMessage as Msg} from "react-intl";
    <Msg id="greeting" defaultMessage="Hello" />   // references FormattedMessage

Only top-level import declarations create bindings. Local shadowing of an
imported name is not tracked.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .nodes import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    JSXIdentifier,
    Node,
    Program,
    StringLiteral,
)

__all__ = ["DEFAULT_EXPORT", "NAMESPACE_EXPORT", "ImportBinding", "ImportScope"]

# Imported name recorded for ``import x from "m"``.
DEFAULT_EXPORT = "default"
# Imported name recorded for ``import * as x from "m"``.
NAMESPACE_EXPORT = "*"


@dataclass(frozen=True, slots=True)
class ImportBinding:
    """Local name bound to an export of a module."""

    local: str
    module: str
    imported: str


@dataclass(slots=True)
class ImportScope:
    """Import bindings of one compilation unit, keyed by local name."""

    bindings: dict[str, ImportBinding] = field(default_factory=dict)

    @classmethod
    def from_program(cls, program: Program) -> ImportScope:
        """Collect the bindings of a program's top-level imports."""
        scope = cls()
        for statement in program.body:
            if isinstance(statement, ImportDeclaration):
                scope.add_declaration(statement)
        return scope

    def add_declaration(self, declaration: ImportDeclaration) -> None:
        """Bind every specifier of an import declaration."""
        module = declaration.source.value
        for specifier in declaration.specifiers:
            match specifier:
                case ImportSpecifier(local=local, imported=Identifier(name=imported)):
                    self._bind(local.name, module, imported)
                case ImportSpecifier(local=local, imported=StringLiteral(value=imported)):
                    # import {"quoted name" as local} from "m"
                    self._bind(local.name, module, imported)
                case ImportDefaultSpecifier(local=local):
                    self._bind(local.name, module, DEFAULT_EXPORT)
                case ImportNamespaceSpecifier(local=local):
                    self._bind(local.name, module, NAMESPACE_EXPORT)
                case _:
                    pass

    def _bind(self, local: str, module: str, imported: str) -> None:
        self.bindings[local] = ImportBinding(local=local, module=module, imported=imported)

    def lookup(self, name: str) -> ImportBinding | None:
        """Binding of a local name, if it was imported."""
        return self.bindings.get(name)

    def references_import(self, node: Node, module: str, name: str) -> bool:
        """Check whether an identifier refers to ``name`` exported by ``module``.

        Args:
            node: Identifier or JSXIdentifier (any other node never matches)
            module: Module source, e.g. "react-intl"
            name: Exported name, e.g. "FormattedMessage"

        Returns:
            True if the identifier's binding is that import
        """
        if not isinstance(node, Identifier | JSXIdentifier):
            return False
        binding = self.bindings.get(node.name)
        return binding is not None and binding.module == module and binding.imported == name
