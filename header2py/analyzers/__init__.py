"""Analyzers for header2py

Modules:
- TypeMapper: Maps parsed C types to ctypes tokens
"""

from header2py.analyzers.type_mapper import (
    TypeMapper, PRIMITIVE_TYPES, KNOWN_TYPE_NAMES, FALLBACK, is_known_type
)

__all__ = [
    'TypeMapper',
    'PRIMITIVE_TYPES',
    'KNOWN_TYPE_NAMES',
    'FALLBACK',
    'is_known_type',
]
