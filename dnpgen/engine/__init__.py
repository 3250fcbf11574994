"""Processing engine for the DNP3 point list generator."""

from .classifier import (
    TypeFamily,
    EXPLICIT_OUTPUT_TAGS,
    FAMILY_MARKERS,
    resolve_type_family,
    is_explicit_output,
    get_point_family,
    classify_point,
    classify_into,
    classify_declarations,
    get_family_summary,
)

from .project import (
    ProjectLayoutError,
    ProjectPaths,
    RESOURCE_SUBPATH,
    LIST_FILE_NAME,
)

from .sigext import (
    SigExtError,
    build_sigext_command,
    run_sigext,
)

from .generator import (
    GenerationResult,
    prepare_signal_file,
    generate_lists,
)

__all__ = [
    # Classifier
    "TypeFamily",
    "EXPLICIT_OUTPUT_TAGS",
    "FAMILY_MARKERS",
    "resolve_type_family",
    "is_explicit_output",
    "get_point_family",
    "classify_point",
    "classify_into",
    "classify_declarations",
    "get_family_summary",
    # Project layout
    "ProjectLayoutError",
    "ProjectPaths",
    "RESOURCE_SUBPATH",
    "LIST_FILE_NAME",
    # SIGEXT
    "SigExtError",
    "build_sigext_command",
    "run_sigext",
    # Generation
    "GenerationResult",
    "prepare_signal_file",
    "generate_lists",
]
