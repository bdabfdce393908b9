"""Test CLI main module"""

import pytest
import subprocess
import sys
from pathlib import Path

from header2py.cli.main import main, generate_bindings
from header2py.core.conventions import HeaderConventions

FIXTURE = Path(__file__).parent.parent / "fixtures" / "genai_c.h"
PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestGenerateBindings:
    """Test suite for generate_bindings"""

    def test_generates_genai_bindings(self, tmp_path):
        out_dir = tmp_path / "genai"
        result = generate_bindings(FIXTURE, out_dir)

        assert result.written == [out_dir / "api.py", out_dir / "funcs.py"]
        assert result.config.package_name == "genai"
        assert len(result.config.opaque_types) == 8
        assert len(result.config.functions) == 21

    def test_explicit_package_name(self, tmp_path):
        result = generate_bindings(FIXTURE, tmp_path / "out", package_name="ortgenai")
        assert "package ortgenai" in (tmp_path / "out" / "funcs.py").read_text()
        assert result.config.package_name == "ortgenai"

    def test_missing_file_raises_error(self, tmp_path):
        """Test that missing header raises error"""
        with pytest.raises(FileNotFoundError):
            generate_bindings(tmp_path / "nonexistent.h", tmp_path / "out")
        assert not (tmp_path / "out").exists()

    def test_require_functions_writes_nothing(self, tmp_path):
        """Test that a header without functions fails before writing"""
        header = tmp_path / "empty.h"
        header.write_text("typedef struct Handle Handle;\n")

        with pytest.raises(ValueError, match="No functions found"):
            generate_bindings(header, tmp_path / "out", require_functions=True)
        assert not (tmp_path / "out").exists()

    def test_empty_header_still_generates(self, tmp_path):
        """Test an empty header yields valid, empty artifacts with warnings"""
        header = tmp_path / "empty.h"
        header.write_text("")

        result = generate_bindings(header, tmp_path / "out")

        assert len(result.written) == 2
        assert len(result.logger.warnings) == 2

    def test_custom_conventions(self, tmp_path):
        header = tmp_path / "mylib.h"
        header.write_text(
            "typedef struct MyDevice MyDevice;\n"
            "MYLIB_EXPORT int32_t MYLIB_CALL Mylib_OpenDevice(const char* name, MyDevice** out);\n"
        )
        conventions = HeaderConventions(
            export_marker="MYLIB_EXPORT", call_marker="MYLIB_CALL", name_prefix="Mylib_",
        )

        result = generate_bindings(header, tmp_path / "mylib", conventions=conventions)

        assert result.config.functions[0].generated_name == "OpenDevice"
        api = (tmp_path / "mylib" / "api.py").read_text()
        assert "def OpenDevice(self, name: ctypes.c_char_p, out: ctypes.POINTER(MyDevice)) -> ctypes.c_int32: ..." in api


class TestCliMain:
    """Test suite for CLI main"""

    def test_successful_run(self, tmp_path, capsys):
        out_dir = tmp_path / "genai"
        assert main([str(FIXTURE), "--out", str(out_dir)]) == 0

        captured = capsys.readouterr()
        assert f"Parsing header file: {FIXTURE}" in captured.out
        assert "Package name: genai" in captured.out
        assert "Found 8 opaque types" in captured.out
        assert "Found 21 functions" in captured.out
        assert f"Generated: {out_dir / 'api.py'}" in captured.out
        assert "Code generation completed successfully!" in captured.out
        assert "Warning: " in captured.err
        assert "OgaTensorShape" in captured.err

    def test_package_flag(self, tmp_path, capsys):
        assert main([str(FIXTURE), "--out", str(tmp_path / "out"), "--package", "ortgenai"]) == 0
        assert "Package name: ortgenai" in capsys.readouterr().out

    def test_missing_header_exit_code(self, tmp_path, capsys):
        """Test that a missing header is reported and exits non-zero"""
        assert main([str(tmp_path / "missing.h"), "--out", str(tmp_path / "out")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_out_flag(self, tmp_path):
        """Test that --out is required"""
        with pytest.raises(SystemExit) as exc_info:
            main([str(FIXTURE)])
        assert exc_info.value.code == 2

    def test_strict_empty_header(self, tmp_path, capsys):
        header = tmp_path / "empty.h"
        header.write_text("/* nothing exported */\n")

        assert main([str(header), "--out", str(tmp_path / "out"), "--strict"]) == 1
        assert "No functions found" in capsys.readouterr().err

    def test_unwritable_output(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        assert main([str(FIXTURE), "--out", str(blocker / "genai")]) == 1
        assert "Error: Cannot write output to" in capsys.readouterr().err

    def test_bad_convention_spec(self, tmp_path, capsys):
        code = main([str(FIXTURE), "--out", str(tmp_path / "out"), "--convention", "export_marker"])
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_convention_file(self, tmp_path):
        """Test loading conventions from a YAML file"""
        config_file = tmp_path / "conventions.yaml"
        config_file.write_text("conventions:\n  api_file: surface.py\n  funcs_file: symbols.py\n")
        out_dir = tmp_path / "genai"

        assert main([str(FIXTURE), "--out", str(out_dir), "--convention-file", str(config_file)]) == 0
        assert (out_dir / "surface.py").is_file()
        assert (out_dir / "symbols.py").is_file()

    def test_file_flags_override_convention_file(self, tmp_path):
        config_file = tmp_path / "conventions.yaml"
        config_file.write_text("conventions:\n  api_file: surface.py\n")
        out_dir = tmp_path / "genai"

        args = [str(FIXTURE), "--out", str(out_dir), "--convention-file", str(config_file),
                "--api-file", "signatures.py"]
        assert main(args) == 0
        assert (out_dir / "signatures.py").is_file()
        assert not (out_dir / "surface.py").exists()

    def test_verbose_prints_summary(self, tmp_path, capsys):
        assert main([str(FIXTURE), "--out", str(tmp_path / "genai"), "-v"]) == 0
        out = capsys.readouterr().out
        assert "=== Generation Summary ===" in out
        assert "functions: 21" in out

    def test_module_entry_point(self, tmp_path):
        """Test running the generator with python -m"""
        out_dir = tmp_path / "genai"
        result = subprocess.run(
            [sys.executable, "-m", "header2py", str(FIXTURE), "--out", str(out_dir)],
            capture_output=True,
            text=True,
            cwd=PROJECT_ROOT,
        )

        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        assert (out_dir / "api.py").is_file()
        assert (out_dir / "funcs.py").is_file()
