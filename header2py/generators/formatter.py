"""Best-effort source formatting for generated modules"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class FormatResult:
    """Outcome of formatting one artifact

    Attributes:
        source: Formatted text, or the unformatted input when error is set
        error: Description of the failure, None on success
    """
    source: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_layout(source: str) -> str:
    """Normalize line endings and blank lines

    Strips trailing whitespace, collapses runs of more than two blank
    lines and ends the text with exactly one newline.
    """
    lines = [line.rstrip() for line in source.replace("\r\n", "\n").replace("\r", "\n").split("\n")]
    text = "\n".join(lines).strip("\n")
    text = re.sub(r"\n{4,}", "\n\n\n", text)
    return text + "\n"


def format_source(source: str, filename: str = "<generated>") -> FormatResult:
    """Format generated Python source

    The source is normalized and then compiled, which also catches errors
    only raised at compile time such as duplicate argument names. On a syntax
    error the unformatted input is returned together with the error
    so the caller can still write it.

    Args:
        source: Rendered module text
        filename: Name used in error messages

    Returns:
        FormatResult
    """
    formatted = normalize_layout(source)
    try:
        compile(formatted, filename, "exec")
    except SyntaxError as e:
        return FormatResult(source=source, error=f"{filename}:{e.lineno}: {e.msg}")
    except ValueError as e:
        # null bytes in the rendered text
        return FormatResult(source=source, error=f"{filename}: {e}")
    return FormatResult(source=formatted)
