"""DNP3 Point List Generator.

Classifies the point declarations of an RTU node's .SIG signal file into the
DNP3 analog/digital input/output lists and writes the __lists.ini mapping,
mirroring a spare for every point so input and output counts stay aligned.
"""

__version__ = "3.2.0"

from .exceptions import DnpGenError

from .models import (
    Category,
    PointFamily,
    PointDeclaration,
    PointAssignment,
    CategoryLists,
    OutputPatternSet,
    RuleSet,
)

from .parsers import (
    SigFileParser,
    SigParseError,
    parse_declaration,
    iter_declarations,
    load_sig_file,
)

from .engine import (
    TypeFamily,
    resolve_type_family,
    classify_point,
    classify_declarations,
    ProjectPaths,
    generate_lists,
)

from .writers import (
    ListWriteError,
    LIST_SECTIONS,
    render_lists,
    write_lists_file,
)

from .config import (
    ConfigError,
    DnpGenConfig,
    load_config,
)

__all__ = [
    # Version
    "__version__",
    "DnpGenError",
    # Models
    "Category",
    "PointFamily",
    "PointDeclaration",
    "PointAssignment",
    "CategoryLists",
    "OutputPatternSet",
    "RuleSet",
    # Parsers
    "SigFileParser",
    "SigParseError",
    "parse_declaration",
    "iter_declarations",
    "load_sig_file",
    # Engine
    "TypeFamily",
    "resolve_type_family",
    "classify_point",
    "classify_declarations",
    "ProjectPaths",
    "generate_lists",
    # Writers
    "ListWriteError",
    "LIST_SECTIONS",
    "render_lists",
    "write_lists_file",
    # Config
    "ConfigError",
    "DnpGenConfig",
    "load_config",
]
