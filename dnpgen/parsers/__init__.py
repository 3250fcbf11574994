"""Parsers for the DNP3 point list generator."""

from .sig_parser import (
    SigFileParser,
    SigParseError,
    SigParseResult,
    DECLARATION_PREFIX,
    DECLARATION_PATTERN,
    parse_declaration,
    iter_declarations,
    load_sig_file,
)

__all__ = [
    "SigFileParser",
    "SigParseError",
    "SigParseResult",
    "DECLARATION_PREFIX",
    "DECLARATION_PATTERN",
    "parse_declaration",
    "iter_declarations",
    "load_sig_file",
]
