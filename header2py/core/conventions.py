"""Header conventions for binding generation.

Describes the header dialect (export and calling-convention markers, the
function name prefix) and the names of the generated files. Conventions
can be loaded from a YAML file and overridden from CLI specs.
"""

import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List

import yaml


_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


@dataclass(frozen=True)
class HeaderConventions:
    """Dialect and output naming for one generator run.

    Attributes:
        export_marker: Macro that opens every exported prototype
        call_marker: Calling-convention macro in front of the function name
        name_prefix: Literal prefix stripped from native function names
        api_file: File name of the public signature module
        funcs_file: File name of the symbol table module
    """
    export_marker: str = "OGA_EXPORT"
    call_marker: str = "OGA_API_CALL"
    name_prefix: str = "Oga"
    api_file: str = "api.py"
    funcs_file: str = "funcs.py"

    def __post_init__(self) -> None:
        for marker in (self.export_marker, self.call_marker):
            if not _IDENTIFIER.match(marker):
                raise ValueError(f"Marker must be a C identifier: {marker!r}")
        for file_name in (self.api_file, self.funcs_file):
            if not file_name.endswith(".py") or not _IDENTIFIER.match(file_name[:-3]):
                raise ValueError(f"Output file must be a Python module name ending in .py: {file_name!r}")
        if self.api_file == self.funcs_file:
            raise ValueError(f"api_file and funcs_file must differ: {self.api_file!r}")

    @property
    def api_module(self) -> str:
        """Import name of the public signature module"""
        return self.api_file[:-3]

    @classmethod
    def keys(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def with_overrides(self, overrides: Dict[str, Any]) -> 'HeaderConventions':
        """Return a copy with the given keys replaced.

        Raises:
            ValueError: If a key is unknown or a value is not a string
        """
        known = set(self.keys())
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown convention key: {key!r} (expected one of {', '.join(sorted(known))})")
            if not isinstance(value, str):
                raise ValueError(f"Convention {key!r} must be a string, got {type(value).__name__}")
        return replace(self, **overrides)

    def load_from_cli(self, specs: List[str]) -> 'HeaderConventions':
        """Apply CLI argument specs.

        Parses specs like: ["export_marker=MYLIB_EXPORT", "name_prefix=Mylib"]

        Args:
            specs: List of "key=value" strings

        Returns:
            Updated conventions
        """
        overrides: Dict[str, str] = {}
        for spec in specs:
            if '=' not in spec:
                raise ValueError(f"Invalid convention spec {spec!r}, expected KEY=VALUE")
            key, value = spec.split('=', 1)
            overrides[key.strip()] = value.strip()
        return self.with_overrides(overrides)

    def load_from_yaml(self, path: Path) -> 'HeaderConventions':
        """Apply conventions from a YAML config file.

        Expected layout:

            conventions:
              export_marker: OGA_EXPORT
              call_marker: OGA_API_CALL
              name_prefix: Oga

        Args:
            path: Path to YAML config file

        Returns:
            Updated conventions

        Raises:
            FileNotFoundError: If path doesn't exist
            ValueError: If the file content is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Convention file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not config:
            return self
        if not isinstance(config, dict) or not isinstance(config.get('conventions', {}), dict):
            raise ValueError(f"Convention file {path} must contain a 'conventions' mapping")

        return self.with_overrides(config.get('conventions') or {})
