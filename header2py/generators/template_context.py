"""Template context shared by the artifact generators

Flattens a GeneratorConfig into the already-named, already-sorted values
the generators render, so both artifacts agree on every identifier.
"""

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import List, Optional, Set

from header2py.core.types import GeneratorConfig, Function
from header2py.core.conventions import HeaderConventions
from header2py.core.generation_logger import GenerationLogger, WarningKind
from header2py.generators.naming import NamingScheme


GENERATOR_NAME = "header2py"


@dataclass(frozen=True)
class ParamView:
    """A parameter as it appears in generated code"""
    name: str
    type_token: str


@dataclass(frozen=True)
class FunctionView:
    """A function as it appears in generated code

    Attributes:
        native_name: Exported symbol name, used for resolution
        method_name: Forwarding method name
        field_name: Attribute holding the resolved symbol
        params: Parameters in native order
        restype: Return token ("None" for void)
    """
    native_name: str
    method_name: str
    field_name: str
    params: List[ParamView]
    restype: str

    @property
    def argtypes(self) -> str:
        return "[" + ", ".join(p.type_token for p in self.params) + "]"

    @property
    def arg_names(self) -> str:
        return ", ".join(p.name for p in self.params)


@dataclass
class TemplateContext:
    """Values rendered into one generated artifact"""
    header_name: str
    package_name: str
    api_module: str
    handle_names: List[str] = field(default_factory=list)
    functions: List[FunctionView] = field(default_factory=list)

    @property
    def banner(self) -> str:
        return f"# Code generated by {GENERATOR_NAME} from {self.header_name}. DO NOT EDIT."


def unique_name(name: str, used: Set[str]) -> str:
    """Append _ to name until it is not in used, then claim it"""
    while name in used:
        name = f"{name}_"
    used.add(name)
    return name


def function_view(func: Function, method_name: Optional[str] = None) -> FunctionView:
    used: Set[str] = set()
    params = [
        ParamView(name=unique_name(NamingScheme.safe_identifier(p.name), used), type_token=p.mapped_type)
        for p in func.params
    ]
    return FunctionView(
        native_name=func.native_name,
        method_name=method_name or NamingScheme.safe_identifier(func.generated_name),
        field_name=NamingScheme.symbol_field_name(func.native_name),
        params=params,
        restype=func.mapped_return_type if func.returns_value else "None",
    )


def function_views(functions: List[Function], logger: GenerationLogger) -> List[FunctionView]:
    """Build views with one distinct method name per function

    The first function keeps a contested name. Later ones fall back to their
    native name and a SUSPICIOUS_DECLARATION warning is logged.
    """
    used: Set[str] = set()
    views = []
    for func in functions:
        method_name = NamingScheme.safe_identifier(func.generated_name)
        if method_name in used:
            fallback = unique_name(NamingScheme.safe_identifier(func.native_name), used)
            logger.log_warning(
                WarningKind.SUSPICIOUS_DECLARATION,
                f"{func.native_name} generates the duplicate method name {method_name}, "
                f"emitting {fallback}",
                symbol=func.native_name,
            )
            method_name = fallback
        else:
            used.add(method_name)
        views.append(function_view(func, method_name))
    return views


def build_context(config: GeneratorConfig,
                  conventions: HeaderConventions,
                  logger: Optional[GenerationLogger] = None) -> TemplateContext:
    """Build the template context for a generator run

    Args:
        config: Parsed declarations and package name
        conventions: Output naming
        logger: GenerationLogger for method name collisions

    Returns:
        TemplateContext with handles sorted by name and functions in header order
    """
    logger = logger if logger is not None else GenerationLogger()
    return TemplateContext(
        header_name=PurePath(config.header_path).name,
        package_name=config.package_name,
        api_module=conventions.api_module,
        handle_names=[t.mapped_name for t in config.sorted_opaque_types()],
        functions=function_views(config.functions, logger),
    )
