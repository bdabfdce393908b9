"""Type mapper for header2py

Converts parsed C type descriptors into ctypes type tokens: Python source
expressions that are evaluated inside the generated binding modules.
"""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

from header2py.core.types import CType
from header2py.core.generation_logger import GenerationLogger, WarningKind


# Token for "no value" (void return)
NO_VALUE = ""
# void* and other untyped handles
UNTYPED_HANDLE = "ctypes.c_void_p"
# Pointer-sized integer used whenever a type cannot be mapped precisely
FALLBACK = "ctypes.c_void_p"
BYTE = "ctypes.c_char"
C_STRING = "ctypes.c_char_p"

PRIMITIVE_TYPES = {
    'bool': 'ctypes.c_bool',
    'int32_t': 'ctypes.c_int32',
    'int64_t': 'ctypes.c_int64',
    'uint8_t': 'ctypes.c_uint8',
    'uint16_t': 'ctypes.c_uint16',
    'uint32_t': 'ctypes.c_uint32',
    'uint64_t': 'ctypes.c_uint64',
    'size_t': 'ctypes.c_size_t',
    'int': 'ctypes.c_int32',
    'double': 'ctypes.c_double',
    'float': 'ctypes.c_float',
}

# Names that are always types, never parameter names
KNOWN_TYPE_NAMES: FrozenSet[str] = frozenset(PRIMITIVE_TYPES) | {'void', 'char'}


def pointer_to(token: str, depth: int = 1) -> str:
    """Wrap a token in `depth` levels of ctypes.POINTER"""
    for _ in range(depth):
        token = f"ctypes.POINTER({token})"
    return token


def is_known_type(name: str) -> bool:
    """Check if a word is a known C type name"""
    return name in KNOWN_TYPE_NAMES


class TypeMapper:
    """Maps CType descriptors to ctypes tokens

    The mapping is total: every descriptor yields some token. Types the
    mapper does not understand fall back to FALLBACK and a TYPE_FALLBACK
    warning is logged so unmapped types stay visible.
    """

    def __init__(self,
                 opaque_names: Union[Iterable[str], Mapping[str, str]] = (),
                 logger: Optional[GenerationLogger] = None) -> None:
        """Initialize type mapper

        Args:
            opaque_names: Names of opaque handle types found in the header, or a
                mapping from those names to their generated class names
            logger: GenerationLogger for fallback warnings
        """
        if isinstance(opaque_names, Mapping):
            self.handle_classes: Dict[str, str] = dict(opaque_names)
        else:
            self.handle_classes = {name: name for name in opaque_names}
        self.logger = logger if logger is not None else GenerationLogger()

    def is_opaque(self, name: str) -> bool:
        return name in self.handle_classes

    def is_type_name(self, name: str) -> bool:
        """Check if a word names a primitive or opaque type"""
        return is_known_type(name) or self.is_opaque(name)

    def map_type(self, ctype: CType, context: Optional[str] = None) -> str:
        """Map a C type to a ctypes token

        Args:
            ctype: Parsed C type
            context: Where the type was seen (for warnings), e.g. "OgaCreateModel"

        Returns:
            ctypes token as string
        """
        base = ctype.base_type
        depth = ctype.pointer_depth

        if base == 'void':
            if not ctype.is_pointer:
                return NO_VALUE
            if depth == 1:
                return UNTYPED_HANDLE
            return pointer_to(UNTYPED_HANDLE)

        if base in PRIMITIVE_TYPES:
            return pointer_to(PRIMITIVE_TYPES[base], depth)

        if base == 'char':
            if depth == 0:
                return BYTE
            if depth == 1:
                return C_STRING
            if depth == 2:
                return pointer_to(C_STRING)
            return self._fallback(ctype, context, "pointer depth too large for char")

        if self.is_opaque(base):
            # A single pointer to an opaque struct is the handle itself
            handle = self.handle_classes[base]
            if depth <= 1:
                return handle
            if depth == 2:
                return pointer_to(handle)
            return self._fallback(ctype, context, f"pointer depth too large for opaque type {base}")

        return self._fallback(ctype, context, f"unrecognized type {base!r}")

    def _fallback(self, ctype: CType, context: Optional[str], reason: str) -> str:
        where = f" in {context}" if context else ""
        self.logger.log_warning(
            WarningKind.TYPE_FALLBACK,
            f"{reason}{where}: mapping '{ctype.spelling()}' to {FALLBACK}",
            symbol=ctype.base_type,
        )
        return FALLBACK
