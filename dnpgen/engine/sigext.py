"""SIGEXT signal extraction tool runner."""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from ..exceptions import DnpGenError

logger = logging.getLogger(__name__)


class SigExtError(DnpGenError):
    """Exception raised when SIGEXT is missing or fails."""
    pass


def build_sigext_command(
    exe_path: str,
    flags: str,
    model_file: str,
    node_name: str,
    sig_file: str
) -> List[str]:
    """
    Build the SIGEXT argument list.

    Format: <exe> [flags...] <model file> <node> <sig file>
    """
    args = [str(exe_path)]
    if flags:
        args.extend(flags.split())
    args.extend([str(model_file), node_name, str(sig_file)])
    return args


def run_sigext(
    exe_path: str,
    flags: str,
    model_file: str,
    node_name: str,
    sig_file: str,
    cwd: Optional[str] = None
) -> None:
    """
    Run SIGEXT to regenerate the node's .SIG file.

    Args:
        exe_path: Path to the SIGEXT executable
        flags: Extra command-line flags, whitespace separated
        model_file: Project model (.mwt) file
        node_name: Node to extract
        sig_file: Target .SIG file
        cwd: Working directory for the tool

    Raises:
        SigExtError: If the executable is missing or exits with an error
    """
    if not exe_path or not Path(exe_path).is_file():
        raise SigExtError(f"SIGEXT executable not found: {exe_path or '(not configured)'}")

    command = build_sigext_command(exe_path, flags, model_file, node_name, sig_file)
    logger.info(f"Running SIGEXT for node {node_name}")
    logger.debug(f"Command: {command}")

    try:
        completed = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise SigExtError(f"Cannot start SIGEXT: {e}") from e

    if completed.returncode != 0:
        detail = (completed.stderr or completed.stdout or "").strip()
        message = f"SIGEXT exited with code {completed.returncode}"
        if detail:
            message += f": {detail}"
        raise SigExtError(message)
