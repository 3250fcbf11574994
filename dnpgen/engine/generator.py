"""End-to-end list generation: parse, classify, write."""

import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from ..models import CategoryLists, RuleSet
from ..parsers import SigFileParser, SigParseError, SigParseResult
from ..writers import write_lists_file, export_assignment_report
from .classifier import classify_declarations
from .project import ProjectPaths
from .sigext import SigExtError, run_sigext

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of a generation run."""
    lists: CategoryLists
    parse_result: SigParseResult
    output_path: Path
    report_path: Optional[Path] = None

    @property
    def counts(self) -> dict:
        return self.lists.counts


def prepare_signal_file(
    paths: ProjectPaths,
    sigext_path: str,
    sigext_flags: str = "",
    skip_ext: bool = False
) -> Path:
    """
    Refresh the node's .SIG file with SIGEXT when possible.

    A SIGEXT failure is logged and the existing .SIG file is used instead.

    Args:
        paths: Resolved project paths
        sigext_path: SIGEXT executable
        sigext_flags: Extra SIGEXT flags
        skip_ext: Do not run SIGEXT

    Returns:
        Path to the .SIG file

    Raises:
        SigParseError: If no .SIG file exists afterwards
    """
    if skip_ext:
        logger.info("SIGEXT skipped")
    else:
        try:
            run_sigext(
                sigext_path,
                sigext_flags,
                str(paths.model_file),
                paths.node_name,
                str(paths.sig_file),
                cwd=str(paths.resource_dir),
            )
        except SigExtError as e:
            logger.error(f"SIGEXT: {e}")

    if not paths.sig_file.is_file():
        raise SigParseError(f"Signal file not found: {paths.sig_file}")

    return paths.sig_file


def generate_lists(
    sig_file: str,
    output_file: str,
    rules: RuleSet,
    report_file: Optional[str] = None
) -> GenerationResult:
    """
    Classify a signal file and write the DNP3 list file.

    Args:
        sig_file: Resolved .SIG file path
        output_file: Resolved __lists.ini path
        rules: Active rule set
        report_file: Optional assignment report path (.xlsx or .csv)

    Returns:
        GenerationResult
    """
    logger.info(f"Processing: {Path(sig_file).name}")
    parse_result = SigFileParser(sig_file).parse()

    lists = classify_declarations(parse_result.declarations, rules)
    logger.debug(f"Classified {lists.point_count} of {parse_result.declaration_count} declarations")

    output_path = write_lists_file(lists, output_file)

    report_path = None
    if report_file:
        report_path = export_assignment_report(lists, report_file)
        logger.info(f"Report saved to {report_path}")

    return GenerationResult(
        lists=lists,
        parse_result=parse_result,
        output_path=output_path,
        report_path=report_path,
    )
