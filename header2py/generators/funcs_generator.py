"""Symbol table module generator

Generates the module holding one resolvable symbol field per exported
function, the initialize_funcs() routine that resolves them from a loaded
library, and one forwarding method per function.
"""

from typing import List

from header2py.generators.template_context import TemplateContext, FunctionView


class FuncsGenerator:
    """Generates the implementation module (funcs.py)"""

    CLASS_NAME = "Funcs"
    INIT_NAME = "initialize_funcs"
    ERROR_NAME = "SymbolResolutionError"

    def generate(self, ctx: TemplateContext) -> str:
        """Generate the complete module

        Args:
            ctx: Template context for this run

        Returns:
            Python source as string
        """
        lines: List[str] = [
            ctx.banner,
            f'"""Native symbol table of package {ctx.package_name}."""',
            "",
            "import ctypes",
            "",
        ]
        lines.extend(self._generate_imports(ctx))
        lines.extend(self._generate_all())
        lines.append("")
        lines.append("")
        lines.extend(self._generate_error())
        lines.append("")
        lines.append("")
        lines.extend(self._generate_resolver())
        lines.append("")
        lines.append("")
        lines.extend(self._generate_class(ctx))
        lines.append("")
        lines.append("")
        lines.extend(self._generate_initializer(ctx))
        return "\n".join(lines) + "\n"

    def _generate_imports(self, ctx: TemplateContext) -> List[str]:
        if not ctx.handle_names:
            return []
        # Both artifacts always share one directory
        lines = [f"from .{ctx.api_module} import ("]
        lines.extend(f"    {name}," for name in ctx.handle_names)
        lines.append(")")
        lines.append("")
        return lines

    def _generate_all(self) -> List[str]:
        names = sorted([self.CLASS_NAME, self.ERROR_NAME, self.INIT_NAME])
        lines = ["__all__ = ["]
        lines.extend(f'    "{name}",' for name in names)
        lines.append("]")
        return lines

    def _generate_error(self) -> List[str]:
        return [
            f"class {self.ERROR_NAME}(RuntimeError):",
            '    """Raised when an exported symbol is missing from the loaded library."""',
        ]

    def _generate_resolver(self) -> List[str]:
        return [
            "def _resolve(lib, name, restype, argtypes):",
            "    try:",
            "        symbol = lib[name]",
            "    except (AttributeError, KeyError) as e:",
            f'        raise {self.ERROR_NAME}(f"failed to resolve {{name}}: {{e}}") from e',
            "    symbol.restype = restype",
            "    symbol.argtypes = argtypes",
            "    return symbol",
        ]

    def _generate_class(self, ctx: TemplateContext) -> List[str]:
        lines = [
            f"class {self.CLASS_NAME}:",
            f'    """Resolved native symbols of {ctx.header_name}.',
            "",
            f"    Create instances with {self.INIT_NAME}(); every method forwards to the",
            "    native function with the same arguments and returns its result unchanged.",
            '    """',
            "",
            "    def __init__(self):",
        ]
        if ctx.functions:
            lines.extend(f"        self.{f.field_name} = None" for f in ctx.functions)
        else:
            lines.append("        pass")

        for func in ctx.functions:
            lines.append("")
            lines.extend(self._generate_forwarder(func))
        return lines

    def _generate_forwarder(self, func: FunctionView) -> List[str]:
        params = ", ".join(["self"] + [p.name for p in func.params])
        return [
            f"    def {func.method_name}({params}):",
            f"        return self.{func.field_name}({func.arg_names})",
        ]

    def _generate_initializer(self, ctx: TemplateContext) -> List[str]:
        lines = [
            f"def {self.INIT_NAME}(lib):",
            '    """Resolve every native symbol from a loaded library.',
            "",
            "    Args:",
            "        lib: Loaded library handle (e.g. ctypes.CDLL); symbols are looked",
            "            up by their exact exported name",
            "",
            "    Returns:",
            f"        {self.CLASS_NAME} with every symbol field populated",
            "",
            "    Raises:",
            f"        {self.ERROR_NAME}: If a symbol is not exported by lib",
            '    """',
            f"    funcs = {self.CLASS_NAME}()",
        ]
        for func in ctx.functions:
            lines.append(
                f'    funcs.{func.field_name} = _resolve(lib, "{func.native_name}", '
                f"{func.restype}, {func.argtypes})"
            )
        lines.append("    return funcs")
        return lines
