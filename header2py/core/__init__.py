"""Core data model, conventions and diagnostics for header2py"""

from header2py.core.types import CType, Param, OpaqueType, Function, GeneratorConfig
from header2py.core.conventions import HeaderConventions
from header2py.core.generation_logger import GenerationLogger, WarningKind, WarningRecord

__all__ = [
    'CType',
    'Param',
    'OpaqueType',
    'Function',
    'GeneratorConfig',
    'HeaderConventions',
    'GenerationLogger',
    'WarningKind',
    'WarningRecord',
]
