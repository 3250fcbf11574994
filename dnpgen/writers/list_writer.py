"""Writer for the DNP3 __lists.ini file."""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List
from dataclasses import dataclass

from ..exceptions import DnpGenError
from ..models import Category, CategoryLists

logger = logging.getLogger(__name__)


class ListWriteError(DnpGenError):
    """Exception raised when the list file cannot be written."""
    pass


@dataclass(frozen=True)
class ListSection:
    """One *LIST section of the output file."""
    category: Category
    code: str
    title: str

    @property
    def header(self) -> str:
        return f"*LIST {self.code}   '{self.title}'"


# Section order and codes are fixed by the RTU mapping table
LIST_SECTIONS = (
    ListSection(Category.AI, "32761", "ENTRADAS ANALOGICAS DNP"),
    ListSection(Category.AO, "32762", "SALIDAS ANALOGICAS DNP"),
    ListSection(Category.DI, "32763", "ENTRADAS DIGITALES DNP"),
    ListSection(Category.DO, "32764", "SALIDAS DIGITALES DNP"),
)


def render_section(section: ListSection, entries: List[str]) -> str:
    """Render a header, its entries and the trailing blank line."""
    lines = [section.header]
    lines.extend(entries)
    lines.append("")
    return "\n".join(lines) + "\n"


def render_lists(lists: CategoryLists) -> str:
    """
    Render all four sections in fixed order.

    Args:
        lists: Filled category lists

    Returns:
        Complete file content
    """
    return "".join(
        render_section(section, lists.entries(section.category))
        for section in LIST_SECTIONS
    )


def _target_mode(path: Path) -> int:
    """Permission bits for the list file: kept from the old file, else umask based."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_lists_file(lists: CategoryLists, output_path: str, encoding: str = "utf-8") -> Path:
    """
    Write the list file.

    Content goes to a temporary file in the target directory which replaces
    the target only once fully written.

    Args:
        lists: Filled category lists
        output_path: Target file path
        encoding: Output encoding

    Returns:
        Path of the written file

    Raises:
        ListWriteError: If the target location is not writable
    """
    path = Path(output_path)
    content = render_lists(lists)

    if not path.parent.is_dir():
        raise ListWriteError(f"Output directory does not exist: {path.parent}")

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        # NamedTemporaryFile is created 0600
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except (OSError, UnicodeEncodeError) as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ListWriteError(f"Cannot write list file {path}: {e}") from e

    logger.info(f"Wrote {path} ({lists.point_count} points)")
    return path
