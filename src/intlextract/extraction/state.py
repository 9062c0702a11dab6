"""Per-unit extraction state.

Python 3.13+.
"""

from dataclasses import dataclass, field

from intlextract.diagnostics import Diagnostic
from intlextract.tree.nodes import Node

from .host import UnitFile
from .options import ExtractionOptions
from .store import ExtractionStore

__all__ = ["ExtractionState"]


@dataclass(slots=True)
class ExtractionState:
    """Everything extraction accumulates while walking one unit.

    Created when the unit begins and discarded after its catalog is
    emitted; nothing is shared between units.

    Attributes:
        unit: Unit being processed
        options: Extraction configuration
        store: Descriptors found so far
        processed: Identities of nodes already extracted
        warnings: Non-fatal diagnostics, in document order
    """

    unit: UnitFile
    options: ExtractionOptions
    store: ExtractionStore
    processed: set[int] = field(default_factory=set)
    warnings: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def begin(cls, unit: UnitFile, options: ExtractionOptions) -> "ExtractionState":
        """Fresh state for a unit."""
        store = ExtractionStore(
            unit=unit,
            enforce_descriptions=options.enforce_descriptions,
            extract_source_location=options.extract_source_location,
            base_dir=options.base_dir,
        )
        return cls(unit=unit, options=options, store=store)

    def is_processed(self, node: Node) -> bool:
        """True if the node was already extracted."""
        return id(node) in self.processed

    def mark_processed(self, node: Node) -> None:
        """Record that the node was extracted."""
        self.processed.add(id(node))

    def warn(self, diagnostic: Diagnostic) -> None:
        """Collect a non-fatal diagnostic."""
        self.warnings.append(diagnostic)
