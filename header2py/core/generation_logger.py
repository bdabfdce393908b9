"""Generation logger for header2py

Tracks declaration counts and non-fatal diagnostics raised while parsing
a header and emitting bindings, and provides summary statistics.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
from enum import Enum


class WarningKind(Enum):
    """Categories of non-fatal diagnostics"""
    TYPE_FALLBACK = "type_fallback"
    EMPTY_PARSE = "empty_parse"
    SUSPICIOUS_DECLARATION = "suspicious_declaration"
    FORMAT_FAILURE = "format_failure"


@dataclass
class WarningRecord:
    """Record of a single diagnostic"""
    kind: WarningKind
    message: str
    symbol: Optional[str] = None


class GenerationLogger:
    """Logs declaration counts and warnings for one generator run"""

    def __init__(self) -> None:
        self.counts: Dict[str, int] = {}
        self.warnings: List[WarningRecord] = []

    def log_count(self, name: str, count: int) -> None:
        """Record a declaration count (e.g. "functions")

        Args:
            name: Counter name
            count: Number of items found
        """
        self.counts[name] = count

    def log_warning(self,
                    kind: WarningKind,
                    message: str,
                    symbol: Optional[str] = None) -> None:
        """Log a non-fatal warning

        Args:
            kind: Warning category
            message: Human-readable message
            symbol: Related type or function name (if applicable)
        """
        self.warnings.append(WarningRecord(kind=kind, message=message, symbol=symbol))

    def warnings_of(self, kind: WarningKind) -> List[WarningRecord]:
        return [w for w in self.warnings if w.kind == kind]

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def get_summary(self) -> Dict:
        """Get summary statistics

        Returns:
            Dictionary with counts and warning statistics
        """
        warnings_by_kind: Dict[WarningKind, int] = {}
        for warning in self.warnings:
            warnings_by_kind[warning.kind] = warnings_by_kind.get(warning.kind, 0) + 1

        return {
            "counts": dict(self.counts),
            "total_warnings": len(self.warnings),
            "warnings_by_kind": warnings_by_kind,
        }

    def format_summary(self) -> str:
        """Generate formatted summary string

        Returns:
            Formatted summary as string
        """
        summary = self.get_summary()
        lines = []

        lines.append("=== Generation Summary ===")
        for name, count in sorted(summary['counts'].items()):
            lines.append(f"{name}: {count}")
        lines.append("")

        lines.append(f"Warnings: {summary['total_warnings']}")
        if summary['warnings_by_kind']:
            for kind, count in sorted(summary['warnings_by_kind'].items(), key=lambda kv: kv[0].value):
                lines.append(f"  {kind.value}: {count}")

        if self.warnings:
            lines.append("Warning details:")
            for warning in self.warnings:
                symbol_part = f"'{warning.symbol}': " if warning.symbol else ""
                lines.append(f"  {warning.kind.value} - {symbol_part}{warning.message}")

        return "\n".join(lines)
