"""Main CLI entry point for the header2py binding generator"""

import sys
import argparse
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from header2py.core.types import GeneratorConfig
from header2py.core.conventions import HeaderConventions
from header2py.core.generation_logger import GenerationLogger
from header2py.parser.reader import read_header
from header2py.parser.extractor import DeclarationExtractor
from header2py.generators.emitter import BindingEmitter, default_package_name


@dataclass
class GenerationResult:
    """Outcome of one generator run"""
    config: GeneratorConfig
    written: List[Path] = field(default_factory=list)
    logger: GenerationLogger = field(default_factory=GenerationLogger)


def generate_bindings(
    header_path: Union[str, Path],
    out_dir: Union[str, Path],
    package_name: Optional[str] = None,
    conventions: Optional[HeaderConventions] = None,
    logger: Optional[GenerationLogger] = None,
    require_functions: bool = False,
) -> GenerationResult:
    """Generate ctypes bindings for a C header

    Args:
        header_path: Path to the C header
        out_dir: Directory receiving the two generated modules
        package_name: Import package of out_dir (default: base name of out_dir)
        conventions: Header dialect and output file names
        logger: GenerationLogger collecting counts and warnings
        require_functions: Treat a header without exported functions as an error

    Returns:
        GenerationResult with the config, written paths and logger

    Raises:
        FileNotFoundError: If header_path doesn't exist
        ValueError: If the header cannot be decoded, or has no functions
            while require_functions is set
        OSError: If the output cannot be written
    """
    conventions = conventions if conventions is not None else HeaderConventions()
    logger = logger if logger is not None else GenerationLogger()
    out_dir = Path(out_dir)

    content = read_header(header_path)

    decls = DeclarationExtractor(conventions, logger).extract(content)
    if require_functions and not decls.functions:
        raise ValueError(f"No functions found in {header_path}")

    config = GeneratorConfig(
        header_path=str(header_path),
        package_name=package_name or default_package_name(out_dir),
        opaque_types=decls.opaque_types,
        functions=decls.functions,
    )

    written = BindingEmitter(conventions, logger).emit(config, out_dir)
    return GenerationResult(config=config, written=written, logger=logger)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="header2py",
        description="Generate ctypes bindings from a C header",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  header2py ort_genai_c.h --out genai/api
  header2py mylib.h --out build/mylib --package mylib \\
      --convention export_marker=MYLIB_EXPORT --convention name_prefix=Mylib
  header2py mylib.h --out build/mylib --convention-file mylib.yaml
        """
    )
    parser.add_argument(
        "header",
        type=Path,
        help="Path to the C header file"
    )
    parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="Output directory for generated code"
    )
    parser.add_argument(
        "--package",
        type=str,
        default=None,
        help="Package name for generated code (default: derived from output directory)"
    )
    parser.add_argument(
        "--convention",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a header convention (export_marker, call_marker, name_prefix, api_file, funcs_file)"
    )
    parser.add_argument(
        "--convention-file",
        type=Path,
        help="Load header conventions from YAML config file"
    )
    parser.add_argument(
        "--api-file",
        type=str,
        help="File name of the public signature module (default: api.py)"
    )
    parser.add_argument(
        "--funcs-file",
        type=str,
        help="File name of the symbol table module (default: funcs.py)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when no functions are found in the header"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the generation summary"
    )
    return parser


def load_conventions(args: argparse.Namespace) -> HeaderConventions:
    """Build conventions from defaults, YAML file and CLI specs"""
    conventions = HeaderConventions()
    if args.convention_file:
        conventions = conventions.load_from_yaml(args.convention_file)
    if args.convention:
        conventions = conventions.load_from_cli(args.convention)

    overrides = {}
    if args.api_file:
        overrides['api_file'] = args.api_file
    if args.funcs_file:
        overrides['funcs_file'] = args.funcs_file
    return conventions.with_overrides(overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        conventions = load_conventions(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    package_name = args.package or default_package_name(args.out)
    print(f"Parsing header file: {args.header}")
    print(f"Package name: {package_name}")

    logger = GenerationLogger()
    try:
        result = generate_bindings(
            args.header,
            args.out,
            package_name=package_name,
            conventions=conventions,
            logger=logger,
            require_functions=args.strict,
        )
    except (FileNotFoundError, IsADirectoryError, PermissionError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot write output to {args.out}: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error generating bindings for {args.header}:", file=sys.stderr)
        traceback.print_exc()
        return 1

    print(f"Found {logger.counts.get('opaque_types', 0)} opaque types")
    print(f"Found {logger.counts.get('functions', 0)} functions")

    for warning in logger.warnings:
        print(f"Warning: {warning.message}", file=sys.stderr)

    for path in result.written:
        print(f"Generated: {path}")

    if args.verbose:
        print("")
        print(logger.format_summary())

    print("Code generation completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
