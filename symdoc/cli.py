"""
symdoc command line.

Usage:
    symdoc generate [--generate-only] [-v] [--be-lenient] [--include-reexported]
                    [--symbol-graphs-dir DIR] [--output-dir DIR] [--modules A,B]
                    [--package-dir DIR] [--jobs N]
    symdoc build [-v] [--package-dir DIR] [SYMBOL_GRAPHS_DIR]
    symdoc validate [--package-dir DIR]
"""

import argparse
import logging
import sys
import uuid
from typing import List, Optional

from . import __version__, logger
from .config import DEFAULT_OUTPUT_DIR, DEFAULT_SYMBOL_GRAPHS_DIR, GenerationConfig
from .doc_processor import DocProcessor, EXIT_BUILD_ERROR, EXIT_PACKAGE_ERROR
from .generation_request import GenerationRequest
from .package import BuildError, PackageValidationError, PackageValidator, SymbolGraphBuilder
from .result import ModuleStatus, ResultStatus
from .tool_config import ToolConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='symdoc',
        description='Generate Markdown interface documentation from Swift symbol graphs'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', required=True)

    generate = subparsers.add_parser('generate', help='Generate API documentation from Swift symbol graphs')
    generate.add_argument('--generate-only', action='store_true',
                          help='Skip build phase, use existing symbol graphs')
    generate.add_argument('-v', '--verbose', action='store_true',
                          help='Show full swift build output and echo the log to stderr')
    generate.add_argument('--be-lenient', action='store_true',
                          help='On build failure, try generating from existing graphs')
    generate.add_argument('--include-reexported', action='store_true',
                          help='Include re-exported symbols in documentation')
    generate.add_argument('--symbol-graphs-dir', default=DEFAULT_SYMBOL_GRAPHS_DIR,
                          help=f'Directory for symbol graphs (default: {DEFAULT_SYMBOL_GRAPHS_DIR})')
    generate.add_argument('--output-dir', default=DEFAULT_OUTPUT_DIR,
                          help=f'Output directory for documentation (default: {DEFAULT_OUTPUT_DIR})')
    generate.add_argument('--modules',
                          help='Comma-separated list of modules to document (default: all public products)')
    generate.add_argument('--package-dir', default='.', help='Root of the Swift package (default: .)')
    generate.add_argument('--jobs', type=int, default=None,
                          help='Modules processed in parallel (default: max_workers from tools.json)')

    build = subparsers.add_parser('build', help='Build symbol graphs without generating documentation')
    build.add_argument('symbol_graphs_dir', nargs='?', default=DEFAULT_SYMBOL_GRAPHS_DIR)
    build.add_argument('-v', '--verbose', action='store_true',
                       help='Show full swift build output and echo the log to stderr')
    build.add_argument('--package-dir', default='.', help='Root of the Swift package (default: .)')

    validate = subparsers.add_parser('validate', help='Validate Package.swift exists')
    validate.add_argument('--package-dir', default='.', help='Root of the Swift package (default: .)')

    return parser


def run_generate(args) -> int:
    try:
        config = GenerationConfig(
            symbol_graphs_dir=args.symbol_graphs_dir,
            output_dir=args.output_dir,
            modules=args.modules,
            generate_only=args.generate_only,
            verbose=args.verbose,
            be_lenient=args.be_lenient,
            include_reexported=args.include_reexported,
            package_dir=args.package_dir,
            max_workers=args.jobs
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PACKAGE_ERROR

    if config.generate_only:
        print("Skipping build (--generate-only)")
    else:
        print("Building symbol graphs...")
    if config.modules:
        print(f"Filtering to modules: {', '.join(sorted(config.modules))}")

    request = GenerationRequest(id=str(uuid.uuid4()), config=config, description="command line")
    result = DocProcessor().process(request)

    for module_result in result.module_results or []:
        marker = {
            ModuleStatus.GENERATED: "Generated",
            ModuleStatus.SKIPPED: "Skipped",
            ModuleStatus.FAILED: "FAILED",
        }[module_result.status]
        print(f"  {marker} {module_result.module}: {module_result.message}")

    if result.status == ResultStatus.SUCCESS:
        print(f"Documentation generated in {config.output_dir}")
    else:
        print(f"Error: {result.message}", file=sys.stderr)
    return result.exit_code


def run_build(args) -> int:
    try:
        PackageValidator(args.package_dir).validate()
        SymbolGraphBuilder(args.package_dir, ToolConfig().swift_path).build(
            args.symbol_graphs_dir, verbose=args.verbose)
    except PackageValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PACKAGE_ERROR
    except BuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BUILD_ERROR

    print(f"Symbol graphs generated in {args.symbol_graphs_dir}")
    return 0


def run_validate(args) -> int:
    try:
        PackageValidator(args.package_dir).validate()
    except PackageValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PACKAGE_ERROR

    print("Package.swift found and validated")
    return 0


COMMANDS = {
    'generate': run_generate,
    'build': run_build,
    'validate': run_validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if getattr(args, 'verbose', False):
        logger.enable_console(logging.DEBUG)
    logger.info(f"symdoc {args.command} started")
    return COMMANDS[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
