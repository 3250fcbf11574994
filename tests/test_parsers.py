"""Tests for the signal file parser."""

import pytest
from dnpgen.parsers import (
    SigFileParser,
    SigParseError,
    parse_declaration,
    iter_declarations,
    load_sig_file,
)


class TestParseDeclaration:
    """Tests for single-line extraction."""

    def test_parse_analog_declaration(self):
        """Test name and type extraction."""
        decl = parse_declaration("SIG=@GV.FT041_H_H TYPE=AA", 7)
        assert decl.name == "FT041_H_H"
        assert decl.type_tag == "AA"
        assert decl.line_number == 7

    def test_surrounding_whitespace_is_trimmed(self):
        """Test indented lines still qualify."""
        decl = parse_declaration("\t  SIG=@GV.PUMP2 TYPE=AO  \r\n")
        assert decl.name == "PUMP2"
        assert decl.type_tag == "AO"

    def test_trailing_fields_ignored(self):
        """Test extra attributes after the type."""
        decl = parse_declaration("SIG=@GV.VALVE1_CMD TYPE=LA DESC=Valve 1 command")
        assert decl.type_tag == "LA"

    def test_non_signal_line_ignored(self):
        """Test lines without the SIG= prefix."""
        assert parse_declaration("NOTES=random text") is None
        assert parse_declaration("") is None
        assert parse_declaration("# SIG=@GV.X TYPE=AA") is None

    def test_unmatched_signal_line_ignored(self):
        """Test SIG= lines that do not fit the pattern."""
        assert parse_declaration("SIG=@XX.OTHER TYPE=AA") is None
        assert parse_declaration("SIG=@GV.NAME") is None
        assert parse_declaration("SIG=@GV.NAME TYPE=aa") is None

    def test_prefix_is_case_sensitive(self):
        """Test lowercase prefix is not a declaration."""
        assert parse_declaration("sig=@GV.NAME TYPE=AA") is None

    def test_name_is_ascii_word_characters(self):
        """Test the name stops at the first non-word character."""
        assert parse_declaration("SIG=@GV.NAME-1 TYPE=AA") is None
        assert parse_declaration("SIG=@GV.NÄME TYPE=AA") is None

    def test_iter_declarations_keeps_order(self):
        """Test declarations are yielded in line order."""
        lines = [
            "SIG=@GV.B TYPE=AA",
            "OTHER=1",
            "SIG=@GV.A TYPE=LA",
        ]
        decls = list(iter_declarations(lines))
        assert [d.name for d in decls] == ["B", "A"]
        assert [d.line_number for d in decls] == [1, 3]


class TestSigFileParser:
    """Tests for file parsing."""

    def test_parse_file(self, sig_file):
        """Test statistics and declarations of the sample file."""
        result = SigFileParser(str(sig_file)).parse()

        assert result.lines_read == 12
        assert result.signal_lines == 10
        assert result.declaration_count == 9
        assert result.skipped_lines == [12]
        assert result.declarations[0].name == "FT041_H_H"
        assert result.declarations[0].line_number == 3

    def test_missing_file(self, tmp_path):
        """Test missing file raises SigParseError."""
        with pytest.raises(SigParseError):
            SigFileParser(str(tmp_path / "missing.SIG"))

    def test_directory_is_not_a_file(self, tmp_path):
        """Test a directory path is rejected."""
        with pytest.raises(SigParseError):
            load_sig_file(str(tmp_path))

    def test_crlf_file(self, tmp_path):
        """Test Windows line endings."""
        path = tmp_path / "NODE.SIG"
        path.write_bytes(b"SIG=@GV.A TYPE=AA\r\nSIG=@GV.B TYPE=DO\r\n")

        result = load_sig_file(str(path))
        assert [d.name for d in result.declarations] == ["A", "B"]
        assert [d.type_tag for d in result.declarations] == ["AA", "DO"]

    def test_empty_file(self, tmp_path):
        """Test an empty file yields nothing."""
        path = tmp_path / "EMPTY.SIG"
        path.write_text("", encoding="latin-1")

        result = load_sig_file(str(path))
        assert result.declaration_count == 0
        assert result.lines_read == 0
