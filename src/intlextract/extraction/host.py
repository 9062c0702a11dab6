"""Capabilities the extraction engine needs from its host.

The engine never parses source code itself. A host (a compiler plugin, or
the reference host in :mod:`intlextract.tree`) walks the tree in document
order and lends the engine two capabilities:

- a static evaluator reducing an expression node to a constant
- a reference resolver telling whether an identifier refers to a given
  export of a given module

plus the metadata of the compilation unit being processed.

Python 3.13+. Zero external dependencies.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from intlextract.diagnostics import Diagnostic
from intlextract.tree.evaluator import Evaluation
from intlextract.tree.nodes import Node

__all__ = ["Evaluation", "ReferenceResolver", "StaticEvaluator", "UnitFile", "locate"]


class StaticEvaluator(Protocol):
    """Reduces an expression to a constant when possible."""

    def evaluate(self, node: Node) -> Evaluation:
        """Return Evaluation(confident=True, value=...) for constants."""
        ...


class ReferenceResolver(Protocol):
    """Resolves identifiers to module imports."""

    def references_import(self, node: Node, module: str, name: str) -> bool:
        """True if ``node`` is an identifier bound to ``name`` exported by ``module``."""
        ...


@dataclass(frozen=True, slots=True)
class UnitFile:
    """Compilation unit metadata.

    Attributes:
        filename: Path of the unit's source file
        source: Source text, used for code frames in diagnostics (optional)
    """

    filename: str
    source: str | None = None

    @property
    def basename(self) -> str:
        """File name without directory and extension: "src/App.js" -> "App"."""
        return Path(self.filename).stem

    def relative_path(self, base_dir: Path) -> Path:
        """Unit path relative to base_dir; a relative filename is taken as relative to it."""
        path = Path(self.filename)
        if not path.is_absolute():
            path = base_dir / path
        return Path(os.path.relpath(path, base_dir))


def locate(diagnostic: Diagnostic, node: Node, unit: UnitFile | None = None) -> Diagnostic:
    """Attach a node's source position (and the unit's filename) to a diagnostic."""
    span = node.loc.to_span() if node.loc is not None else None
    return diagnostic.located(span, unit.filename if unit is not None else None)
