"""Tests for naming scheme"""

import pytest
from header2py.generators.naming import NamingScheme


class TestNamingScheme:
    """Test suite for NamingScheme"""

    def test_generated_name_strips_prefix(self):
        """Test removing the library prefix"""
        assert NamingScheme.generated_name("OgaCreateModel") == "CreateModel"

    def test_generated_name_removes_underscores(self):
        """Test removing underscore separators"""
        assert NamingScheme.generated_name("OgaGenerator_GetNextTokens") == "GeneratorGetNextTokens"

    def test_generated_name_prefix_must_lead(self):
        """Test the prefix is only removed at the start"""
        assert NamingScheme.generated_name("CreateOgaModel") == "CreateOgaModel"

    def test_generated_name_prefix_is_case_sensitive(self):
        assert NamingScheme.generated_name("ogaCreateModel") == "ogaCreateModel"

    def test_generated_name_prefix_removed_once(self):
        assert NamingScheme.generated_name("OgaOgaThing") == "OgaThing"

    def test_generated_name_custom_prefix(self):
        assert NamingScheme.generated_name("mylib_open_device", "mylib_") == "opendevice"

    def test_generated_name_empty_prefix(self):
        assert NamingScheme.generated_name("Oga_Shutdown", "") == "OgaShutdown"

    def test_symbol_field_name(self):
        assert NamingScheme.symbol_field_name("OgaCreateModel") == "_OgaCreateModel"

    def test_placeholder_name(self):
        assert NamingScheme.placeholder_name(0) == "arg0"
        assert NamingScheme.placeholder_name(3) == "arg3"

    @pytest.mark.parametrize("name,expected", [
        ("config_path", "config_path"),
        ("lambda", "lambda_"),
        ("from", "from_"),
        ("None", "None_"),
        ("self", "self_"),
        ("2D", "_2D"),
        ("", "_"),
        ("tokens[]", "tokens__"),
    ])
    def test_safe_identifier(self, name, expected):
        """Test mangling of keywords and invalid identifiers"""
        assert NamingScheme.safe_identifier(name) == expected

    def test_is_valid_identifier(self):
        assert NamingScheme.is_valid_identifier("out_count")
        assert not NamingScheme.is_valid_identifier("class")
        assert not NamingScheme.is_valid_identifier("1st")
        assert not NamingScheme.is_valid_identifier("")

    @pytest.mark.parametrize("name,expected", [
        ("OgaModel", "OgaModel"),
        ("API", "API_"),
        ("Protocol", "Protocol_"),
        ("ctypes", "ctypes_"),
        ("Funcs", "Funcs_"),
        ("initialize_funcs", "initialize_funcs_"),
        ("None", "None_"),
    ])
    def test_handle_class_name(self, name, expected):
        """Test handles never shadow names of the generated modules"""
        assert NamingScheme.handle_class_name(name) == expected
