"""Parameter parser for header2py

Splits a prototype's parameter list into Param records, handling unnamed
parameters, function-pointer parameters and const-qualified declarations.
"""

import re
from typing import List, Optional

from header2py.core.types import CType, Param
from header2py.analyzers.type_mapper import TypeMapper, FALLBACK
from header2py.generators.naming import NamingScheme


# "(*name)" inside a function-pointer declarator
FUNC_PTR_PATTERN = re.compile(r'\(\s*\*\s*(\w*)\s*\)')

# Base type assumed when a declaration does not spell one out
PLACEHOLDER_BASE_TYPE = "int"


def parse_c_type(type_str: str) -> CType:
    """Parse a C type spelling into a CType

    Every `const` keyword is removed (and recorded), every `*` is counted as
    one pointer level, and the remaining words form the base type.
    Whitespace around `*` is irrelevant: "Model * *" and "Model**" are the
    same type.

    Args:
        type_str: C type text (e.g. "const char*", "OgaModel **")

    Returns:
        Parsed CType
    """
    words = type_str.replace('*', ' * ').split()
    is_const = 'const' in words
    pointer_depth = words.count('*')
    base_words = [w for w in words if w not in ('const', '*')]
    return CType(
        base_type=' '.join(base_words),
        pointer_depth=pointer_depth,
        is_const=is_const,
    )


def split_params(params_str: str) -> List[str]:
    """Split a parameter list on top-level commas

    Commas nested inside parentheses (a function-pointer parameter's own
    parameter list) do not split.

    Args:
        params_str: Raw parameter list without the outer parentheses

    Returns:
        Stripped, non-empty parameter declarations
    """
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for ch in params_str:
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth = max(depth - 1, 0)
        elif ch == ',' and depth == 0:
            parts.append(''.join(current))
            current = []
            continue
        current.append(ch)
    parts.append(''.join(current))

    return [p.strip() for p in parts if p.strip()]


class ParameterParser:
    """Parses parameter lists using a TypeMapper for type resolution"""

    def __init__(self, type_mapper: TypeMapper) -> None:
        self.type_mapper = type_mapper

    def parse_params(self, params_str: str, context: Optional[str] = None) -> List[Param]:
        """Parse a full parameter list

        Args:
            params_str: Raw comma-joined parameter list
            context: Owning function name (for warnings)

        Returns:
            Params in declaration order; empty for "" and "void"
        """
        params_str = ' '.join(params_str.split())
        if params_str in ('', 'void'):
            return []
        return [
            self.parse_param(part, index, context)
            for index, part in enumerate(split_params(params_str))
        ]

    def parse_param(self, param_str: str, index: int = 0, context: Optional[str] = None) -> Param:
        """Parse a single parameter declaration

        Args:
            param_str: One declaration, e.g. "const char* path" or "OgaModel*"
            index: Position in the parameter list (used for placeholder names)
            context: Owning function name (for warnings)

        Returns:
            Param with a non-empty name and its mapped type
        """
        param_str = ' '.join(param_str.split())

        func_ptr = FUNC_PTR_PATTERN.search(param_str)
        if func_ptr:
            # Callbacks are passed through as opaque pointers
            name = func_ptr.group(1) or NamingScheme.placeholder_name(index)
            return Param(
                name=name,
                ctype=CType(base_type='void', pointer_depth=1),
                mapped_type=FALLBACK,
            )

        words = param_str.replace('*', ' * ').split()
        is_const = 'const' in words
        pointer_depth = words.count('*')
        words = [w for w in words if w not in ('const', '*')]

        if len(words) == 1:
            word = words[0]
            if self.type_mapper.is_type_name(word):
                # Unnamed parameter: the only word is its type
                name = NamingScheme.placeholder_name(index)
                base_type = word
            else:
                name = word
                base_type = PLACEHOLDER_BASE_TYPE
        elif len(words) > 1:
            name = words[-1]
            base_type = ' '.join(words[:-1])
        else:
            name = NamingScheme.placeholder_name(index)
            base_type = PLACEHOLDER_BASE_TYPE

        ctype = CType(base_type=base_type, pointer_depth=pointer_depth, is_const=is_const)
        where = f"{context}({name})" if context else name
        return Param(
            name=name,
            ctype=ctype,
            mapped_type=self.type_mapper.map_type(ctype, context=where),
        )
