"""Public API module generator

Generates the module declaring one ctypes handle class per opaque type and
an API Protocol with one method signature per exported function.
"""

from typing import List

from header2py.generators.template_context import TemplateContext, FunctionView


class ApiGenerator:
    """Generates the public signature module (api.py)

    Output example:
        # Code generated by header2py from ort_genai_c.h. DO NOT EDIT.
        import ctypes
        from typing import Protocol

        class OgaModel(ctypes.c_void_p):
            \"\"\"Opaque handle to a native OgaModel.\"\"\"

        class API(Protocol):
            def CreateModel(self, config_path: ctypes.c_char_p, out: ctypes.POINTER(OgaModel)) -> OgaResult: ...
    """

    PROTOCOL_NAME = "API"

    def generate(self, ctx: TemplateContext) -> str:
        """Generate the complete module

        Args:
            ctx: Template context for this run

        Returns:
            Python source as string
        """
        lines: List[str] = [
            ctx.banner,
            f'"""Native API surface of package {ctx.package_name}.',
            "",
            "Opaque handles are distinct ctypes.c_void_p subclasses. A handle whose",
            "value is None (null) is absent or already destroyed.",
            '"""',
            "",
            "import ctypes",
            "from typing import Protocol",
            "",
        ]
        lines.extend(self._generate_all(ctx))
        lines.append("")

        for handle in ctx.handle_names:
            lines.append("")
            lines.extend(self._generate_handle(handle))

        lines.append("")
        lines.extend(self._generate_protocol(ctx))
        return "\n".join(lines) + "\n"

    def _generate_all(self, ctx: TemplateContext) -> List[str]:
        names = sorted([self.PROTOCOL_NAME] + ctx.handle_names)
        lines = ["__all__ = ["]
        lines.extend(f'    "{name}",' for name in names)
        lines.append("]")
        return lines

    def _generate_handle(self, handle: str) -> List[str]:
        return [
            f"class {handle}(ctypes.c_void_p):",
            f'    """Opaque handle to a native {handle}."""',
            "",
        ]

    def _generate_protocol(self, ctx: TemplateContext) -> List[str]:
        lines = [
            f"class {self.PROTOCOL_NAME}(Protocol):",
            f'    """Functions exported by {ctx.header_name}."""',
        ]
        for func in ctx.functions:
            lines.append("")
            lines.append(f"    {self._signature(func)}")
        return lines

    def _signature(self, func: FunctionView) -> str:
        """Render one method stub, e.g. `def Shutdown(self) -> None: ...`"""
        params = ["self"] + [f"{p.name}: {p.type_token}" for p in func.params]
        return f"def {func.method_name}({', '.join(params)}) -> {func.restype}: ..."
