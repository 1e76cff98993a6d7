"""Tests for the material file parser."""

import logging

import pytest
from pyseam.parsing.material.material_file_parser import MaterialFileParser, ParserState


class TestParseRecords:
    """Test the two-line record grammar."""

    def test_formatted_record(self, parser, write_file, steel_record_text):
        """Test the reference steel record."""
        materials = parser.parse(write_file("steel.mat", steel_record_text))
        assert list(materials) == ["1011"]
        steel = materials["1011"]
        assert steel.subsystem_id == "1011"
        assert steel.material_type == "ISOELASTIC"
        assert steel.properties == pytest.approx([7.85e-6, 2.07e8, 8.0e7, 0.3])
        assert parser.warnings == []

    def test_comma_delimited_record_matches_formatted(self, parser, steel_record_text):
        """Free format with commas yields the same record as the formatted input."""
        formatted = parser.parse_lines(steel_record_text.splitlines())
        free = parser.parse_lines(["1011, ISOELASTIC, steeL",
                                   " 7.85e-6,2.07e8,8.0e7, 0.3"])
        assert free["1011"] == formatted["1011"]

    def test_trailing_comment_dropped(self, parser):
        materials = parser.parse_lines(["1011 ISOELASTIC steel",
                                        "7.85e-6 2.07e8 8.0e7 0.3 panel_b"])
        assert materials["1011"].properties == pytest.approx([7.85e-6, 2.07e8, 8.0e7, 0.3])

    def test_table_reference_stops_numeric_fields(self, parser):
        """A '#<id>' cross-reference ends the numeric part of the line."""
        materials = parser.parse_lines([" 1011, ISOELASTIC, steeL",
                                        "  7.85e-6,2.07e8,8.0e7, 0.3, #1061,, panel_b"])
        assert materials["1011"].properties == pytest.approx([7.85e-6, 2.07e8, 8.0e7, 0.3])

    def test_more_than_six_values_accepted(self, parser):
        materials = parser.parse_lines(["5001 FIBER", "1 2 3 4 5 6 7 8"])
        assert materials["5001"].properties == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
        assert len(parser.warnings) == 1
        assert "8 values" in parser.warnings[0].message

    def test_multiple_records(self, parser):
        materials = parser.parse_lines(["1 ISOELASTIC", "1.0 2.0",
                                        "2 GAS", "3.0",
                                        "3 LIQUID", "4.0 5.0 6.0"])
        assert sorted(materials) == ["1", "2", "3"]
        assert materials["2"].material_type == "GAS"
        assert materials["3"].properties == [4.0, 5.0, 6.0]

    def test_unknown_type_stored_as_given(self, parser):
        materials = parser.parse_lines(["7 Unobtainium", "1.0"])
        assert materials["7"].material_type == "Unobtainium"
        assert parser.warnings == []

    def test_sample_file(self, parser, panel_mat_path):
        """Test the bundled sample deck."""
        materials = parser.parse(panel_mat_path)
        assert sorted(materials) == ["1011", "1012", "2001", "3001", "4001", "5001", "6001"]
        assert materials["2001"].material_type == "GAS"
        assert materials["2001"].properties == pytest.approx([1.21e-9, 343000.0, 0.0001])
        assert materials["5001"].properties == pytest.approx([3.2e-8, 2.0, 1.21e-9, 343000.0, 10000.0, 7.0e-3])
        assert materials["1011"].properties == pytest.approx([7.85e-6, 2.07e8, 8.0e7, 0.3])
        assert parser.warnings == []


class TestSkippedLines:
    """Test that filler lines never advance the header/properties cycle."""

    def test_comments_blank_and_section_lines(self, parser):
        materials = parser.parse_lines(["! comment",
                                        "((MATDATA",
                                        "1 ISOELASTIC",
                                        "",
                                        "! between header and properties",
                                        "(FREQVAL",
                                        ")",
                                        "1.0 2.0",
                                        "))",
                                        "2 GAS",
                                        "3.0"])
        assert materials["1"].properties == [1.0, 2.0]
        assert materials["2"].properties == [3.0]
        assert len(materials) == 2

    def test_whitespace_only_line_is_blank(self, parser):
        materials = parser.parse_lines(["1 GAS", "   \t", "1.0"])
        assert materials["1"].properties == [1.0]

    def test_delimiter_only_line_is_filler(self, parser):
        materials = parser.parse_lines(["1 GAS", ",,,", "1.0"])
        assert materials["1"].properties == [1.0]

    def test_indented_comment_is_not_a_comment(self, parser):
        """Only column 1 marks a comment."""
        materials = parser.parse_lines([" ! not a comment", "1.0"])
        assert "!" in materials
        assert materials["!"].material_type == "not"

    def test_windows_line_endings(self, parser):
        materials = parser.parse_lines(["1 GAS\r\n", "\r\n", "1.0 2.0\r\n"])
        assert materials["1"].material_type == "GAS"
        assert materials["1"].properties == [1.0, 2.0]

    def test_leading_skip_lines_keep_phase(self, parser):
        """A file opening with filler still starts with a header line."""
        materials = parser.parse_lines(["", "!", ")", "10 SOLIDWAVE", "1.0", "11 FIBERZ", "2.0"])
        assert materials["10"].properties == [1.0]
        assert materials["11"].properties == [2.0]


class TestLenientParsing:
    """Test soft handling of malformed input."""

    def test_duplicate_id_replaces_record(self, parser):
        materials = parser.parse_lines(["1 ISOELASTIC", "1 2 3",
                                        "1 GAS", "4 5"])
        assert len(materials) == 1
        assert materials["1"].material_type == "GAS"
        assert materials["1"].properties == [4.0, 5.0]
        assert any("duplicate" in w.message for w in parser.warnings)

    def test_trailing_header_without_properties(self, parser):
        materials = parser.parse_lines(["1011 ISOELASTIC steel"])
        assert materials["1011"].properties == []
        assert parser.state is ParserState.PROPERTIES
        assert len(parser.warnings) == 1
        assert "no properties line" in parser.warnings[0].message

    def test_header_without_type(self, parser):
        materials = parser.parse_lines(["42", "1.0"])
        assert materials["42"].material_type == ""
        assert materials["42"].properties == [1.0]
        assert "no material type" in parser.warnings[0].message

    def test_properties_line_without_numbers(self, parser):
        """A non-numeric properties line still completes the record."""
        materials = parser.parse_lines(["1 GAS", "air 1.0 2.0", "2 LIQUID", "3.0"])
        assert materials["1"].properties == []
        assert materials["2"].properties == [3.0]
        assert parser.warnings[0].line_number == 2

    def test_warnings_are_logged(self, parser, caplog):
        with caplog.at_level(logging.WARNING):
            parser.parse_lines(["42", "1.0"])
        assert "no material type" in caplog.text


class TestParseFailures:
    """Test handling of unreadable files."""

    def test_missing_file_returns_empty(self, parser, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            materials = parser.parse(tmp_path / "missing.mat")
        assert materials == {}
        assert "Failed to open file" in caplog.text

    def test_directory_returns_empty(self, parser, tmp_path):
        assert parser.parse(tmp_path) == {}

    def test_unknown_encoding_returns_empty(self, write_file, steel_record_text, caplog):
        path = write_file("steel.mat", steel_record_text)
        with caplog.at_level(logging.ERROR):
            materials = MaterialFileParser(encoding="utf-9").parse(path)
        assert materials == {}
        assert "Failed to open file" in caplog.text

    def test_failed_parse_clears_previous_result(self, parser, write_file, steel_record_text, tmp_path):
        assert parser.parse(write_file("steel.mat", steel_record_text))
        parser.parse_lines(["42"])
        assert parser.warnings
        assert parser.parse(tmp_path / "vanished.mat") == {}
        assert parser.warnings == []
        assert parser.state is ParserState.HEADER


class TestByteOrderMark:
    """Test files saved with a leading byte order mark."""

    def test_bom_file_default_encoding(self, parser, tmp_path):
        path = tmp_path / "bom.mat"
        path.write_bytes("! c\n1 GAS\n1.0\n".encode('utf-8-sig'))
        materials = parser.parse(path)
        assert list(materials) == ["1"]
        assert materials["1"].properties == [1.0]
        assert parser.warnings == []

    def test_bom_file_explicit_utf8(self, tmp_path):
        path = tmp_path / "bom.mat"
        path.write_bytes("! c\n1 GAS\n1.0\n".encode('utf-8-sig'))
        assert list(MaterialFileParser(encoding='utf-8').parse(path)) == ["1"]

    def test_bom_in_lines(self, parser):
        materials = parser.parse_lines(["\ufeff1011 ISOELASTIC", "0.3"])
        assert list(materials) == ["1011"]

    def test_plain_utf8_still_read(self, parser, tmp_path):
        path = tmp_path / "plain.mat"
        path.write_bytes("! c\n1 GAS\n1.0\n".encode('utf-8'))
        assert parser.parse(path)["1"].properties == [1.0]


class TestParserReuse:
    """Test that every parse starts from a clean state."""

    def test_results_are_independent(self, parser):
        first = parser.parse_lines(["1 GAS"])
        second = parser.parse_lines(["2 LIQUID", "1.0"])
        assert list(first) == ["1"]
        assert list(second) == ["2"]
        assert second["2"].properties == [1.0]
        assert parser.warnings == []

    def test_custom_encoding(self, tmp_path):
        path = tmp_path / "latin.mat"
        path.write_bytes("! Dämpfung\n1 GAS\n1.0\n".encode('latin-1'))
        materials = MaterialFileParser(encoding='latin-1').parse(path)
        assert materials["1"].properties == [1.0]

    def test_undecodable_bytes_do_not_abort(self, parser, tmp_path):
        path = tmp_path / "legacy.mat"
        path.write_bytes(b"! D\xe4mpfung\n1 GAS\n1.0\n")
        assert parser.parse(path)["1"].properties == [1.0]
