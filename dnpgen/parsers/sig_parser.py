"""Signal definition (.SIG) file parser for DNP3 list generation."""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional
from dataclasses import dataclass, field

from ..exceptions import DnpGenError
from ..models import PointDeclaration

logger = logging.getLogger(__name__)


class SigParseError(DnpGenError):
    """Exception raised when a signal file cannot be read."""
    pass


# Only lines starting with this literal are candidate declarations
DECLARATION_PREFIX = "SIG="

# SIG=@GV.<name> TYPE=<tag>
DECLARATION_PATTERN = re.compile(r'SIG=@GV\.(\w+)\s+TYPE=([A-Z]+)', re.ASCII)

# .SIG files are produced by a Windows tool; latin-1 never fails to decode
DEFAULT_ENCODING = "latin-1"


def parse_declaration(line: str, line_number: int = 0) -> Optional[PointDeclaration]:
    """
    Extract a point declaration from one line.

    Args:
        line: Raw text line
        line_number: 1-based position of the line in its file

    Returns:
        PointDeclaration, or None when the line is not a declaration
    """
    stripped = line.strip()
    if not stripped.startswith(DECLARATION_PREFIX):
        return None

    match = DECLARATION_PATTERN.search(stripped)
    if not match:
        return None

    return PointDeclaration(
        name=match.group(1),
        type_tag=match.group(2),
        line_number=line_number,
    )


def iter_declarations(lines: Iterable[str]) -> Iterator[PointDeclaration]:
    """Yield declarations in line order, skipping everything else."""
    for line_number, line in enumerate(lines, start=1):
        declaration = parse_declaration(line, line_number)
        if declaration is not None:
            yield declaration


@dataclass
class SigParseResult:
    """Result of parsing a signal file."""
    declarations: List[PointDeclaration] = field(default_factory=list)
    lines_read: int = 0
    signal_lines: int = 0       # Lines starting with SIG=
    skipped_lines: List[int] = field(default_factory=list)  # SIG= lines that did not match

    @property
    def declaration_count(self) -> int:
        return len(self.declarations)


class SigFileParser:
    """Parser for .SIG signal definition files."""

    def __init__(self, file_path: str, encoding: str = DEFAULT_ENCODING):
        """
        Initialize the parser with a file path.

        Args:
            file_path: Path to the .SIG file
            encoding: Text encoding of the file
        """
        self.file_path = Path(file_path)
        self.encoding = encoding
        if not self.file_path.is_file():
            raise SigParseError(f"Signal file not found: {file_path}")

    def parse(self) -> SigParseResult:
        """
        Read the whole file and collect its declarations.

        Returns:
            SigParseResult with declarations in file order
        """
        result = SigParseResult()

        try:
            with open(self.file_path, "r", encoding=self.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    result.lines_read = line_number
                    if not line.strip().startswith(DECLARATION_PREFIX):
                        continue

                    result.signal_lines += 1
                    declaration = parse_declaration(line, line_number)
                    if declaration is None:
                        result.skipped_lines.append(line_number)
                        continue
                    result.declarations.append(declaration)
        except OSError as e:
            raise SigParseError(f"Cannot read signal file {self.file_path}: {e}") from e

        logger.debug(
            f"{self.file_path.name}: {result.lines_read} lines, "
            f"{result.signal_lines} SIG= lines, {result.declaration_count} declarations"
        )
        if result.skipped_lines:
            logger.debug(f"Unmatched SIG= lines: {result.skipped_lines}")

        return result


def load_sig_file(file_path: str, encoding: str = DEFAULT_ENCODING) -> SigParseResult:
    """
    Convenience function to parse a signal file.

    Args:
        file_path: Path to the .SIG file
        encoding: Text encoding of the file

    Returns:
        SigParseResult
    """
    parser = SigFileParser(file_path, encoding)
    return parser.parse()
