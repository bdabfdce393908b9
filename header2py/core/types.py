"""Declaration model for header2py

Defines the C type descriptor, parameter, opaque type and function records
produced by the parser, and the GeneratorConfig handed to the emitter.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CType:
    """A parsed C type

    Attributes:
        base_type: Base type name with const and pointer markers removed
        pointer_depth: Number of '*' levels
        is_const: True if any const qualifier was present
    """

    base_type: str
    pointer_depth: int = 0
    is_const: bool = False

    def __post_init__(self) -> None:
        if self.pointer_depth < 0:
            raise ValueError(f"pointer_depth must be non-negative, got {self.pointer_depth}")

    @property
    def is_pointer(self) -> bool:
        return self.pointer_depth > 0

    def spelling(self) -> str:
        """Render back to C spelling (e.g. "const char**")"""
        prefix = "const " if self.is_const else ""
        return f"{prefix}{self.base_type}{'*' * self.pointer_depth}"


@dataclass
class Param:
    """A function parameter with its mapped target type"""

    name: str
    ctype: CType
    mapped_type: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Param name must not be empty")


@dataclass(frozen=True)
class OpaqueType:
    """An opaque handle declared as `typedef struct X X;`"""

    native_name: str
    mapped_name: str


@dataclass
class Function:
    """An exported function prototype

    Attributes:
        native_name: Exact exported symbol name
        return_type: Parsed return type
        mapped_return_type: Target token for the return type ("" for void)
        params: Parameters in declaration order
        generated_name: Target-friendly method name
    """

    native_name: str
    return_type: CType
    mapped_return_type: str
    params: List[Param] = field(default_factory=list)
    generated_name: str = ""

    @property
    def returns_value(self) -> bool:
        return self.mapped_return_type != ""


@dataclass
class GeneratorConfig:
    """Everything the emitter needs for one generator run"""

    header_path: str
    package_name: str
    opaque_types: List[OpaqueType] = field(default_factory=list)
    functions: List[Function] = field(default_factory=list)

    def sorted_opaque_types(self) -> List[OpaqueType]:
        """Opaque types in a stable order for emission"""
        return sorted(self.opaque_types, key=lambda t: t.native_name)
