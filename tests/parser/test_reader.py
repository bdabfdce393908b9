"""Tests for the header reader"""

import pytest

from header2py.parser.reader import read_header


class TestReadHeader:
    """Test suite for read_header"""

    def test_reads_text(self, tmp_path):
        header = tmp_path / "lib.h"
        header.write_text("typedef struct A A;\n")
        assert read_header(header) == "typedef struct A A;\n"

    def test_accepts_str_path(self, tmp_path):
        header = tmp_path / "lib.h"
        header.write_text("int x;")
        assert read_header(str(header)) == "int x;"

    def test_normalizes_crlf(self, tmp_path):
        """Test that Windows line endings are read as \\n"""
        header = tmp_path / "lib.h"
        header.write_bytes(b"line1\r\nline2\r\n")
        assert read_header(header) == "line1\nline2\n"

    def test_missing_file_raises_error(self, tmp_path):
        """Test that a missing header is an input error"""
        with pytest.raises(FileNotFoundError):
            read_header(tmp_path / "missing.h")

    def test_directory_raises_error(self, tmp_path):
        with pytest.raises(IsADirectoryError):
            read_header(tmp_path)

    def test_invalid_utf8_raises_value_error(self, tmp_path):
        header = tmp_path / "latin1.h"
        header.write_bytes(b"// caf\xe9\n")
        with pytest.raises(ValueError):
            read_header(header)
