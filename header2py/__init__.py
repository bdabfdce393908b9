"""header2py - ctypes binding generator for C headers

Reads a C header describing a library's exported API and generates two
Python modules: opaque handle classes with an API Protocol of typed
signatures, and a symbol table that resolves and forwards every native
function from a loaded library.
"""

__version__ = "0.1.0"

from header2py.cli.main import generate_bindings, GenerationResult

__all__ = [
    "__version__",
    "generate_bindings",
    "GenerationResult",
]
