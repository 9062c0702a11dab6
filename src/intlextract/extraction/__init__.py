"""Message extraction engine.

Recognizes message declarations while a host walks the source tree, resolves
and validates them, deduplicates them per unit and emits per-unit catalogs.

Python 3.13+.
"""

from .descriptor import MessageDescriptor, RawDescriptor, SourceLocation, build_raw_descriptor
from .dispatcher import ExtractionDispatcher
from .emitter import CatalogEmitter, UnitResult
from .host import Evaluation, ReferenceResolver, StaticEvaluator, UnitFile, locate
from .options import ExtractionOptions
from .resolver import DescriptorResolver, ResolvedDescriptor
from .state import ExtractionState
from .store import ExtractionStore, storage_key
from .unit import extract_file, extract_unit

__all__ = [
    "CatalogEmitter",
    "DescriptorResolver",
    "Evaluation",
    "ExtractionDispatcher",
    "ExtractionOptions",
    "ExtractionState",
    "ExtractionStore",
    "MessageDescriptor",
    "RawDescriptor",
    "ReferenceResolver",
    "ResolvedDescriptor",
    "SourceLocation",
    "StaticEvaluator",
    "UnitFile",
    "UnitResult",
    "build_raw_descriptor",
    "extract_file",
    "extract_unit",
    "locate",
    "storage_key",
]
