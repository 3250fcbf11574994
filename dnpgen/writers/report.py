"""Point assignment report export (Excel or CSV)."""

from pathlib import Path
from typing import List, Dict, Any

import pandas as pd

from ..models import CategoryLists
from .list_writer import ListWriteError

REPORT_COLUMNS = [
    "Line",
    "Point",
    "Type Tag",
    "Family",
    "Category",
    "Spare Category",
    "Spare Entry",
]


def build_assignment_rows(lists: CategoryLists) -> List[Dict[str, Any]]:
    """One row per classified point, in encounter order."""
    rows = []
    for assignment in lists.assignments:
        declaration = assignment.declaration
        rows.append({
            "Line": declaration.line_number,
            "Point": assignment.entry,
            "Type Tag": declaration.type_tag,
            "Family": assignment.family.value,
            "Category": assignment.category.value,
            "Spare Category": assignment.spare_category.value,
            "Spare Entry": assignment.spare_entry,
        })
    return rows


def build_assignment_frame(lists: CategoryLists) -> pd.DataFrame:
    """Build the report as a DataFrame."""
    return pd.DataFrame(build_assignment_rows(lists), columns=REPORT_COLUMNS)


def export_assignment_report(lists: CategoryLists, output_path: str) -> Path:
    """
    Export the point assignment report.

    The format follows the file extension: .xlsx/.xls for Excel, anything
    else is written as CSV.

    Args:
        lists: Filled category lists
        output_path: Report file path

    Returns:
        Path of the written report
    """
    path = Path(output_path)
    df = build_assignment_frame(lists)

    try:
        if path.suffix.lower() in (".xlsx", ".xls"):
            df.to_excel(path, index=False, sheet_name="Assignments")
        else:
            df.to_csv(path, index=False)
    except OSError as e:
        raise ListWriteError(f"Cannot write report {path}: {e}") from e

    return path
