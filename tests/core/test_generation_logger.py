"""Tests for the generation logger"""

from header2py.core.generation_logger import GenerationLogger, WarningKind


class TestGenerationLogger:
    """Test suite for GenerationLogger"""

    def test_initial_state(self):
        """Test that a new logger is empty"""
        logger = GenerationLogger()
        assert logger.counts == {}
        assert logger.warnings == []
        assert not logger.has_warnings()

    def test_log_count(self):
        """Test counters"""
        logger = GenerationLogger()
        logger.log_count("functions", 3)
        logger.log_count("functions", 4)
        logger.log_count("skipped_typedefs", 2)
        assert logger.counts == {"functions": 4, "skipped_typedefs": 2}

    def test_log_warning(self):
        """Test recording warnings by kind"""
        logger = GenerationLogger()
        logger.log_warning(WarningKind.TYPE_FALLBACK, "unrecognized type 'Foo'", symbol="Foo")
        logger.log_warning(WarningKind.EMPTY_PARSE, "no functions found")

        assert logger.has_warnings()
        fallbacks = logger.warnings_of(WarningKind.TYPE_FALLBACK)
        assert len(fallbacks) == 1
        assert fallbacks[0].symbol == "Foo"

    def test_get_summary(self):
        """Test summary statistics"""
        logger = GenerationLogger()
        logger.log_count("functions", 0)
        logger.log_warning(WarningKind.EMPTY_PARSE, "no functions found")
        logger.log_warning(WarningKind.EMPTY_PARSE, "no opaque types found")

        summary = logger.get_summary()
        assert summary["counts"] == {"functions": 0}
        assert summary["total_warnings"] == 2
        assert summary["warnings_by_kind"] == {WarningKind.EMPTY_PARSE: 2}

    def test_format_summary(self):
        """Test formatted summary text"""
        logger = GenerationLogger()
        logger.log_count("functions", 2)
        logger.log_warning(WarningKind.TYPE_FALLBACK, "unrecognized type 'Foo'", symbol="Foo")

        text = logger.format_summary()
        assert "=== Generation Summary ===" in text
        assert "functions: 2" in text
        assert "Warnings: 1" in text
        assert "type_fallback - 'Foo': unrecognized type 'Foo'" in text
