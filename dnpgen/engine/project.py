"""RTU project layout resolution."""

from pathlib import Path
from dataclasses import dataclass

from ..exceptions import DnpGenError


class ProjectLayoutError(DnpGenError):
    """Exception raised when the project does not have the expected layout."""
    pass


# Resource directory relative to the project root
RESOURCE_SUBPATH = Path("C", "CWave_Micro", "R", "RTU_RESOURCE")

LIST_FILE_NAME = "__lists.ini"
SIG_SUFFIX = ".SIG"
MODEL_SUFFIX = ".mwt"


@dataclass(frozen=True)
class ProjectPaths:
    """Resolved paths for one node of an RTU project."""
    project_root: Path
    node_name: str
    resource_dir: Path
    sig_file: Path
    model_file: Path
    list_file: Path

    @classmethod
    def resolve(cls, project_root: str, node_name: str) -> "ProjectPaths":
        """
        Resolve the node's files from the project root.

        The model file is looked up in the project root first and then in
        the resource directory. The signal file need not exist yet since
        SIGEXT may create it.

        Args:
            project_root: Root directory of the RTU project
            node_name: Node name (file stem of the .SIG and .mwt files)

        Returns:
            ProjectPaths

        Raises:
            ProjectLayoutError: If the resource directory does not exist
        """
        if not node_name:
            raise ProjectLayoutError("Node name is empty")

        root = Path(project_root).resolve()
        resource_dir = root / RESOURCE_SUBPATH
        if not resource_dir.is_dir():
            raise ProjectLayoutError(f"Resource directory not found: {resource_dir}")

        model_file = root / f"{node_name}{MODEL_SUFFIX}"
        if not model_file.exists():
            model_file = resource_dir / f"{node_name}{MODEL_SUFFIX}"

        return cls(
            project_root=root,
            node_name=node_name,
            resource_dir=resource_dir,
            sig_file=resource_dir / f"{node_name}{SIG_SUFFIX}",
            model_file=model_file,
            list_file=resource_dir / LIST_FILE_NAME,
        )
