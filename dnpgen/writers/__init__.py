"""Output writers for the DNP3 point list generator."""

from .list_writer import (
    ListSection,
    ListWriteError,
    LIST_SECTIONS,
    render_section,
    render_lists,
    write_lists_file,
)

from .report import (
    REPORT_COLUMNS,
    build_assignment_rows,
    build_assignment_frame,
    export_assignment_report,
)

__all__ = [
    # List file
    "ListSection",
    "ListWriteError",
    "LIST_SECTIONS",
    "render_section",
    "render_lists",
    "write_lists_file",
    # Report
    "REPORT_COLUMNS",
    "build_assignment_rows",
    "build_assignment_frame",
    "export_assignment_report",
]
