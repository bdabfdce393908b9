"""Binding emitter for header2py

Renders the two generated artifacts from one GeneratorConfig, formats
them and writes them to the output directory.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Union

from header2py.core.types import GeneratorConfig
from header2py.core.conventions import HeaderConventions
from header2py.core.generation_logger import GenerationLogger, WarningKind
from header2py.generators.template_context import build_context
from header2py.generators.api_generator import ApiGenerator
from header2py.generators.funcs_generator import FuncsGenerator
from header2py.generators.formatter import format_source


@dataclass
class RenderedArtifact:
    """One generated file, rendered but not yet written"""
    file_name: str
    source: str
    formatted: bool


class BindingEmitter:
    """Emits api.py and funcs.py for a GeneratorConfig

    Usage:
        emitter = BindingEmitter()
        paths = emitter.emit(config, Path("genai/internal/api"))
    """

    def __init__(self,
                 conventions: Optional[HeaderConventions] = None,
                 logger: Optional[GenerationLogger] = None) -> None:
        """Initialize emitter

        Args:
            conventions: Output file naming (default: HeaderConventions())
            logger: GenerationLogger for naming and formatting warnings
        """
        self.conventions = conventions if conventions is not None else HeaderConventions()
        self.logger = logger if logger is not None else GenerationLogger()
        self.api_generator = ApiGenerator()
        self.funcs_generator = FuncsGenerator()

    def render(self, config: GeneratorConfig) -> List[RenderedArtifact]:
        """Render and format both artifacts

        A formatting failure is logged as a FORMAT_FAILURE warning and the
        unformatted text is kept.

        Args:
            config: Generator configuration

        Returns:
            [api artifact, funcs artifact]
        """
        ctx = build_context(config, self.conventions, self.logger)
        renders = [
            (self.conventions.api_file, self.api_generator.generate(ctx)),
            (self.conventions.funcs_file, self.funcs_generator.generate(ctx)),
        ]

        artifacts = []
        for file_name, source in renders:
            result = format_source(source, filename=file_name)
            if not result.ok:
                self.logger.log_warning(
                    WarningKind.FORMAT_FAILURE,
                    f"failed to format {file_name}, writing unformatted code: {result.error}",
                    symbol=file_name,
                )
            artifacts.append(RenderedArtifact(file_name=file_name, source=result.source, formatted=result.ok))
        return artifacts

    def emit(self, config: GeneratorConfig, out_dir: Union[str, Path]) -> List[Path]:
        """Render both artifacts and write them to out_dir

        Nothing is written unless both artifacts render. When
        config.package_name is empty the base name of out_dir is used.

        Args:
            config: Generator configuration
            out_dir: Output directory, created if missing

        Returns:
            Paths of the written files

        Raises:
            OSError: If the directory cannot be created or a file cannot be written
        """
        out_dir = Path(out_dir)
        if not config.package_name:
            config = replace(config, package_name=default_package_name(out_dir))

        artifacts = self.render(config)

        out_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for artifact in artifacts:
            path = out_dir / artifact.file_name
            with open(path, 'w', encoding='utf-8', newline='\n') as f:
                f.write(artifact.source)
            written.append(path)
        return written


def default_package_name(out_dir: Union[str, Path]) -> str:
    """Package name derived from the output directory's base name"""
    out_dir = Path(out_dir)
    # "." and similar have no name of their own
    return out_dir.name or out_dir.resolve().name
