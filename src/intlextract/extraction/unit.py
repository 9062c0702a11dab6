"""Per-unit orchestration.

One call extracts one compilation unit: begin a fresh state, walk the tree
in document order, and emit the catalog. The first fatal error aborts the
unit; nothing is emitted for it.

Python 3.13+.
"""

import logging
from pathlib import Path

from intlextract.diagnostics import ExtractionError
from intlextract.tree.evaluator import LiteralEvaluator
from intlextract.tree.loader import load_program_file
from intlextract.tree.nodes import Program
from intlextract.tree.scope import ImportScope

from .dispatcher import ExtractionDispatcher
from .emitter import CatalogEmitter, UnitResult
from .host import ReferenceResolver, StaticEvaluator, UnitFile
from .options import ExtractionOptions
from .state import ExtractionState

__all__ = ["extract_file", "extract_unit"]

logger = logging.getLogger(__name__)

_AST_SUFFIX = ".json"


def extract_unit(
    program: Program,
    unit: UnitFile,
    options: ExtractionOptions | None = None,
    *,
    evaluator: StaticEvaluator | None = None,
    references: ReferenceResolver | None = None,
) -> UnitResult:
    """Extract the messages of one compilation unit.

    Args:
        program: Root of the unit's tree
        unit: Unit metadata
        options: Extraction configuration (defaults when omitted)
        evaluator: Static evaluator (default: LiteralEvaluator)
        references: Import resolver (default: the program's ImportScope)

    Returns:
        UnitResult with metadata, descriptors, warnings and catalog path

    Raises:
        ExtractionError: On the first invalid message declaration

    Example:
        >>> result = extract_unit(program, UnitFile("src/App.js"))
        >>> [m.id for m in result.messages]
        ['greeting']
    """
    options = options if options is not None else ExtractionOptions()
    state = ExtractionState.begin(unit, options)
    dispatcher = ExtractionDispatcher(
        state,
        evaluator=evaluator if evaluator is not None else LiteralEvaluator(),
        references=references if references is not None else ImportScope.from_program(program),
    )

    try:
        dispatcher.visit(program)
    except ExtractionError as e:
        logger.error("Extraction of %s failed: %s", unit.filename, e)
        raise

    result = CatalogEmitter(options).emit(state)
    logger.info(
        "Extracted %d message(s) from %s (%d warning(s))",
        len(result.messages),
        unit.filename,
        len(result.warnings),
    )
    return result


def extract_file(
    ast_path: str | Path,
    options: ExtractionOptions | None = None,
    *,
    filename: str | None = None,
    source: str | None = None,
) -> UnitResult:
    """Extract the messages of a unit from its Babel JSON AST file.

    Args:
        ast_path: Babel JSON AST file
        options: Extraction configuration
        filename: Source file the AST was produced from (default: ast_path
            without its ".json" suffix, so "App.js.json" stands for "App.js")
        source: Source text, for code frames in diagnostics

    Raises:
        TreeLoadError: If the file is not a Babel JSON AST
        ExtractionError: On the first invalid message declaration
    """
    ast_path = Path(ast_path)
    if filename is None:
        filename = str(ast_path.with_suffix("") if ast_path.suffix == _AST_SUFFIX else ast_path)
    program = load_program_file(ast_path)
    return extract_unit(program, UnitFile(filename=filename, source=source), options)
