"""Header parsing for header2py

Modules:
- reader: Loads header text
- extractor: DeclarationExtractor for opaque types and exported prototypes
- param_parser: ParameterParser and C type spelling parser
"""

from header2py.parser.reader import read_header
from header2py.parser.param_parser import ParameterParser, parse_c_type, split_params
from header2py.parser.extractor import (
    DeclarationExtractor, Declarations, TYPEDEF_PATTERN, FUNCTION_PATTERN, normalize_whitespace
)

__all__ = [
    'read_header',
    'ParameterParser',
    'parse_c_type',
    'split_params',
    'DeclarationExtractor',
    'Declarations',
    'TYPEDEF_PATTERN',
    'FUNCTION_PATTERN',
    'normalize_whitespace',
]
