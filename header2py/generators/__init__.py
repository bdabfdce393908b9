"""header2py.generators package

Code generators for turning parsed declarations into ctypes bindings.
"""

from .naming import NamingScheme
from .template_context import TemplateContext, FunctionView, ParamView, build_context
from .api_generator import ApiGenerator
from .funcs_generator import FuncsGenerator
from .formatter import format_source, FormatResult
from .emitter import BindingEmitter, RenderedArtifact, default_package_name

__all__ = [
    "NamingScheme",
    "TemplateContext",
    "FunctionView",
    "ParamView",
    "build_context",
    "ApiGenerator",
    "FuncsGenerator",
    "format_source",
    "FormatResult",
    "BindingEmitter",
    "RenderedArtifact",
    "default_package_name",
]
