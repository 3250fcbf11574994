"""Tests for list file and report writers."""

import os
import stat

import pandas as pd
import pytest
from dnpgen.models import CategoryLists
from dnpgen.parsers import iter_declarations
from dnpgen.engine import classify_declarations
from dnpgen.writers import (
    LIST_SECTIONS,
    ListWriteError,
    REPORT_COLUMNS,
    render_lists,
    write_lists_file,
    build_assignment_frame,
    export_assignment_report,
)


EMPTY_OUTPUT = (
    "*LIST 32761   'ENTRADAS ANALOGICAS DNP'\n"
    "\n"
    "*LIST 32762   'SALIDAS ANALOGICAS DNP'\n"
    "\n"
    "*LIST 32763   'ENTRADAS DIGITALES DNP'\n"
    "\n"
    "*LIST 32764   'SALIDAS DIGITALES DNP'\n"
    "\n"
)


class TestListWriter:
    """Tests for __lists.ini rendering."""

    def test_section_order_and_codes(self):
        """Test the fixed section table."""
        assert [(s.category.value, s.code) for s in LIST_SECTIONS] == [
            ("AI", "32761"),
            ("AO", "32762"),
            ("DI", "32763"),
            ("DO", "32764"),
        ]

    def test_render_empty_lists(self):
        """Test headers and blank lines with no entries."""
        assert render_lists(CategoryLists()) == EMPTY_OUTPUT

    def test_render_entries(self, rules):
        """Test entries are written under their section."""
        lists = classify_declarations(iter_declarations([
            "SIG=@GV.FT041_H_H TYPE=AA",
            "SIG=@GV.VALVE1_CMD TYPE=LA",
        ]), rules)

        assert render_lists(lists) == (
            "*LIST 32761   'ENTRADAS ANALOGICAS DNP'\n"
            "@GV.FT041_H_H\n"
            "\n"
            "*LIST 32762   'SALIDAS ANALOGICAS DNP'\n"
            "SPARE_AO(FT041_H_H)\n"
            "\n"
            "*LIST 32763   'ENTRADAS DIGITALES DNP'\n"
            "SPARE_DI(VALVE1_CMD)\n"
            "\n"
            "*LIST 32764   'SALIDAS DIGITALES DNP'\n"
            "@GV.VALVE1_CMD\n"
            "\n"
        )

    def test_write_file(self, tmp_path):
        """Test the file is written with LF line endings."""
        path = tmp_path / "__lists.ini"

        written = write_lists_file(CategoryLists(), str(path))

        assert written == path
        assert path.read_bytes() == EMPTY_OUTPUT.encode("utf-8")
        assert [p.name for p in tmp_path.iterdir()] == ["__lists.ini"]

    def test_write_replaces_existing_file(self, tmp_path):
        """Test an old list file is overwritten."""
        path = tmp_path / "__lists.ini"
        path.write_text("old content", encoding="utf-8")

        write_lists_file(CategoryLists(), str(path))

        assert path.read_text(encoding="utf-8") == EMPTY_OUTPUT

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_new_file_follows_umask(self, tmp_path):
        """Test a new list file is readable by other accounts under umask 022."""
        path = tmp_path / "__lists.ini"
        previous = os.umask(0o022)
        try:
            write_lists_file(CategoryLists(), str(path))
        finally:
            os.umask(previous)

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_existing_file_keeps_mode(self, tmp_path):
        """Test rewriting keeps the permissions of the old list file."""
        path = tmp_path / "__lists.ini"
        path.write_text("old content", encoding="utf-8")
        os.chmod(path, 0o640)

        write_lists_file(CategoryLists(), str(path))

        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    def test_missing_output_directory(self, tmp_path):
        """Test an unwritable location raises ListWriteError."""
        with pytest.raises(ListWriteError):
            write_lists_file(CategoryLists(), str(tmp_path / "missing" / "__lists.ini"))


class TestReport:
    """Tests for the assignment report."""

    def test_frame_rows(self, rules):
        """Test one row per classified point."""
        lists = classify_declarations(iter_declarations([
            "SIG=@GV.PUMP2 TYPE=AO",
            "SIG=@GV.COUNTER1 TYPE=DINT",
            "SIG=@GV.VALVE1_OPEN TYPE=BOOL",
        ]), rules)

        df = build_assignment_frame(lists)

        assert list(df.columns) == REPORT_COLUMNS
        assert len(df) == 2
        assert df.iloc[0]["Point"] == "@GV.PUMP2"
        assert df.iloc[0]["Category"] == "AO"
        assert df.iloc[0]["Spare Category"] == "AI"
        assert df.iloc[1]["Line"] == 3
        assert df.iloc[1]["Spare Entry"] == "SPARE_DO(VALVE1_OPEN)"

    def test_empty_frame_has_columns(self):
        """Test an empty run still has the report columns."""
        df = build_assignment_frame(CategoryLists())
        assert list(df.columns) == REPORT_COLUMNS
        assert df.empty

    def test_export_csv(self, rules, tmp_path):
        """Test CSV export."""
        lists = classify_declarations(iter_declarations(["SIG=@GV.FT041 TYPE=AA"]), rules)
        path = tmp_path / "report.csv"

        export_assignment_report(lists, str(path))

        df = pd.read_csv(path)
        assert df.iloc[0]["Point"] == "@GV.FT041"
        assert df.iloc[0]["Family"] == "ANALOG"

    def test_export_excel(self, rules, tmp_path):
        """Test Excel export."""
        pytest.importorskip("openpyxl")
        lists = classify_declarations(iter_declarations(["SIG=@GV.HORN1 TYPE=DO"]), rules)
        path = tmp_path / "report.xlsx"

        export_assignment_report(lists, str(path))

        df = pd.read_excel(path, sheet_name="Assignments")
        assert df.iloc[0]["Category"] == "DO"
