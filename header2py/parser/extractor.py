"""Declaration extractor for header2py

Pattern-matches opaque handle typedefs and exported function prototypes
out of raw header text. This is not a C parser: it recognises

    typedef struct X X;
    <EXPORT> <return type> <CALL> <name>(<params>);

and nothing else. The function pattern is greedy up to the first `)` `;`
pair, so a prototype whose parameters contain a function-pointer type is
mis-segmented. Such matches are reported as SUSPICIOUS_DECLARATION
warnings but are not repaired.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern

from header2py.core.types import OpaqueType, Function
from header2py.core.conventions import HeaderConventions
from header2py.core.generation_logger import GenerationLogger, WarningKind
from header2py.analyzers.type_mapper import TypeMapper
from header2py.parser.param_parser import ParameterParser, parse_c_type
from header2py.generators.naming import NamingScheme


TYPEDEF_PATTERN = re.compile(r'typedef\s+struct\s+(\w+)\s+(\w+)\s*;')


def build_function_pattern(export_marker: str, call_marker: str) -> Pattern:
    """Compile the prototype pattern for a marker pair"""
    return re.compile(
        rf'{re.escape(export_marker)}\s+(.+?)\s+{re.escape(call_marker)}\s+(\w+)\s*\(([^)]*)\)\s*;'
    )


_DEFAULT_CONVENTIONS = HeaderConventions()

FUNCTION_PATTERN = build_function_pattern(
    _DEFAULT_CONVENTIONS.export_marker, _DEFAULT_CONVENTIONS.call_marker
)


def normalize_whitespace(text: str) -> str:
    """Collapse line breaks and runs of whitespace into single spaces"""
    return ' '.join(text.split())


@dataclass
class Declarations:
    """Structured declarations extracted from one header"""
    opaque_types: List[OpaqueType] = field(default_factory=list)
    functions: List[Function] = field(default_factory=list)
    skipped_typedefs: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.opaque_types and not self.functions


class DeclarationExtractor:
    """Extracts opaque types and exported functions from header text

    Usage:
        extractor = DeclarationExtractor()
        decls = extractor.extract(read_header("ort_genai_c.h"))
        for func in decls.functions:
            print(func.native_name, func.generated_name)
    """

    def __init__(self,
                 conventions: Optional[HeaderConventions] = None,
                 logger: Optional[GenerationLogger] = None) -> None:
        """Initialize extractor

        Args:
            conventions: Header dialect (default: HeaderConventions())
            logger: GenerationLogger for counts and warnings
        """
        self.conventions = conventions if conventions is not None else HeaderConventions()
        self.logger = logger if logger is not None else GenerationLogger()

        if (self.conventions.export_marker, self.conventions.call_marker) == \
                (_DEFAULT_CONVENTIONS.export_marker, _DEFAULT_CONVENTIONS.call_marker):
            self._function_pattern = FUNCTION_PATTERN
        else:
            self._function_pattern = build_function_pattern(
                self.conventions.export_marker, self.conventions.call_marker
            )

    def extract(self, content: str) -> Declarations:
        """Extract all declarations from header text

        Zero matches is not an error; the counts are logged and an
        EMPTY_PARSE warning is recorded for each empty category.

        Args:
            content: Raw header text

        Returns:
            Declarations in header order
        """
        content = normalize_whitespace(content)

        decls = Declarations()
        decls.opaque_types = self.extract_opaque_types(content, skipped=decls.skipped_typedefs)
        decls.functions = self.extract_functions(content, decls.opaque_types)

        self.logger.log_count("opaque_types", len(decls.opaque_types))
        self.logger.log_count("functions", len(decls.functions))
        self.logger.log_count("skipped_typedefs", len(decls.skipped_typedefs))

        if not decls.opaque_types:
            self.logger.log_warning(WarningKind.EMPTY_PARSE, "no opaque types found")
        if not decls.functions:
            self.logger.log_warning(WarningKind.EMPTY_PARSE, "no functions found")

        return decls

    def extract_opaque_types(self, content: str, skipped: Optional[List[str]] = None) -> List[OpaqueType]:
        """Find `typedef struct X X;` declarations

        Typedefs whose struct tag differs from the alias describe transparent
        structs and are skipped. A handle whose name would shadow a name of
        the generated modules gets a _ suffix and a SUSPICIOUS_DECLARATION
        warning.

        Args:
            content: Header text
            skipped: Optional list collecting skipped alias names

        Returns:
            Opaque types in header order, without duplicates
        """
        types: List[OpaqueType] = []
        seen = set()
        for match in TYPEDEF_PATTERN.finditer(content):
            struct_name, type_name = match.group(1), match.group(2)
            if struct_name != type_name:
                if skipped is not None:
                    skipped.append(type_name)
                continue
            if type_name in seen:
                continue
            seen.add(type_name)
            class_name = NamingScheme.handle_class_name(type_name)
            if class_name != type_name:
                self.logger.log_warning(
                    WarningKind.SUSPICIOUS_DECLARATION,
                    f"opaque type {type_name} cannot keep its name in generated code, emitting class {class_name}",
                    symbol=type_name,
                )
            types.append(OpaqueType(native_name=type_name, mapped_name=class_name))
        return types

    def extract_functions(self, content: str, opaque_types: List[OpaqueType]) -> List[Function]:
        """Find exported function prototypes

        Args:
            content: Header text (whitespace-normalized)
            opaque_types: Opaque types known to the type mapper

        Returns:
            Functions in header order
        """
        mapper = TypeMapper({t.native_name: t.mapped_name for t in opaque_types}, logger=self.logger)
        param_parser = ParameterParser(mapper)

        functions: List[Function] = []
        for match in self._function_pattern.finditer(content):
            return_type_str = match.group(1).strip()
            name = match.group(2)
            params_str = match.group(3).strip()

            self._check_segmentation(name, return_type_str)

            return_type = parse_c_type(return_type_str)
            functions.append(Function(
                native_name=name,
                return_type=return_type,
                mapped_return_type=mapper.map_type(return_type, context=name),
                params=param_parser.parse_params(params_str, context=name),
                generated_name=NamingScheme.generated_name(name, self.conventions.name_prefix),
            ))
        return functions

    def _check_segmentation(self, name: str, return_type_str: str) -> None:
        """Flag matches whose return type swallowed another declaration"""
        if (self.conventions.call_marker in return_type_str
                or ';' in return_type_str
                or '(' in return_type_str):
            self.logger.log_warning(
                WarningKind.SUSPICIOUS_DECLARATION,
                f"return type of {name} spans other declarations: '{return_type_str}'",
                symbol=name,
            )
