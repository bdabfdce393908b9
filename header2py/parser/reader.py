"""Header reader for header2py"""

from pathlib import Path
from typing import Union


def read_header(header_path: Union[str, Path]) -> str:
    """Load a C header into memory

    Args:
        header_path: Path to the header file

    Returns:
        Header text with line endings normalized to "\\n"

    Raises:
        FileNotFoundError: If header_path doesn't exist
        IsADirectoryError: If header_path is a directory
        PermissionError: If header_path cannot be read
        ValueError: If the header is not valid UTF-8
    """
    path = Path(header_path)
    if not path.exists():
        raise FileNotFoundError(f"Header file not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Header path is a directory: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ValueError(f"Header file {path} is not valid UTF-8: {e}") from e
