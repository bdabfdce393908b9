"""Naming scheme for header2py

Implements the naming conventions for generated bindings:
- Methods: native name with the library prefix stripped and underscores removed
  (OgaCreate_Model -> CreateModel)
- Symbol fields: _<native name>
- Unnamed parameters: arg<position>
- Python keywords and `self`: mangled by appending a _ suffix
- Handle classes: _ suffix when they would shadow a generated module name
"""

import keyword
import re


class NamingScheme:
    """Handles Python identifier generation for native declarations"""

    SYMBOL_FIELD_PREFIX = "_"
    PLACEHOLDER_PREFIX = "arg"

    # Names that would shadow the method receiver
    RESERVED = {'self'}

    # Module-level names of the generated api and funcs modules
    MODULE_NAMES = frozenset({
        'API', 'Protocol', 'ctypes',
        'Funcs', 'SymbolResolutionError', 'initialize_funcs', '_resolve',
    })

    @staticmethod
    def generated_name(native_name: str, prefix: str = "Oga") -> str:
        """Derive the generated method name from a native function name

        Args:
            native_name: Exported symbol name (e.g., "OgaCreate_Model")
            prefix: Literal prefix removed when native_name starts with it

        Returns:
            Generated name (e.g., "CreateModel")
        """
        if prefix and native_name.startswith(prefix):
            native_name = native_name[len(prefix):]
        return native_name.replace("_", "")

    @staticmethod
    def symbol_field_name(native_name: str) -> str:
        """Name of the field holding a resolved native symbol"""
        return f"{NamingScheme.SYMBOL_FIELD_PREFIX}{native_name}"

    @staticmethod
    def placeholder_name(index: int) -> str:
        """Synthesized name for an unnamed parameter

        Args:
            index: Position in the parameter list

        Returns:
            Identifier (e.g., "arg0")
        """
        return f"{NamingScheme.PLACEHOLDER_PREFIX}{index}"

    @staticmethod
    def safe_identifier(name: str) -> str:
        """Make a name usable as a Python identifier

        Args:
            name: Candidate name

        Returns:
            The name, sanitized and with a _ suffix if it is a keyword
        """
        name = re.sub(r'\W', '_', name)
        if not name or name[0].isdigit():
            name = f"_{name}"
        if not NamingScheme.is_valid_identifier(name) or name in NamingScheme.RESERVED:
            return f"{name}_"
        return name

    @staticmethod
    def handle_class_name(native_name: str) -> str:
        """Class name of an opaque handle in generated code

        Args:
            native_name: Opaque type name from the header

        Returns:
            native_name, with a _ suffix if it would shadow a generated module name
        """
        name = NamingScheme.safe_identifier(native_name)
        while name in NamingScheme.MODULE_NAMES:
            name = f"{name}_"
        return name

    @staticmethod
    def is_valid_identifier(name: str) -> bool:
        """Check if a string can be emitted unchanged as a Python identifier

        Args:
            name: String to check

        Returns:
            True if valid and not a keyword
        """
        return name.isidentifier() and not keyword.iskeyword(name)
