"""
Symbol graph generation through `swift build`.
"""

import subprocess
from pathlib import Path

from .. import logger


class BuildError(RuntimeError):
    """Raised when `swift build` fails."""

    def __init__(self, exit_code: int, output: str = ""):
        self.exit_code = exit_code
        self.output = output
        message = f"Build failed with exit code {exit_code}"
        if output:
            message += f"\n{output}"
        super().__init__(message)


class SymbolGraphBuilder:
    """Builds the package with symbol graph emission enabled."""

    def __init__(self, package_dir: Path = Path('.'), swift_path: str = 'swift'):
        self.package_dir = Path(package_dir)
        self.swift_path = swift_path

    def build_command(self, symbol_graphs_dir: Path) -> list:
        return [
            self.swift_path, 'build',
            '-Xswiftc', '-emit-symbol-graph',
            '-Xswiftc', '-emit-symbol-graph-dir',
            '-Xswiftc', str(symbol_graphs_dir),
        ]

    def build(self, symbol_graphs_dir: Path, verbose: bool = False):
        """
        Run the build, writing symbol graphs into symbol_graphs_dir.

        Args:
            symbol_graphs_dir: Output directory for the graphs (created if needed)
            verbose: Stream the build output instead of capturing it

        Raises:
            BuildError: If swift is missing or the build exits non-zero
        """
        symbol_graphs_dir = Path(symbol_graphs_dir)
        if not symbol_graphs_dir.is_absolute():
            symbol_graphs_dir = self.package_dir / symbol_graphs_dir
        symbol_graphs_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Building symbol graphs into {symbol_graphs_dir}")
        try:
            result = subprocess.run(
                self.build_command(symbol_graphs_dir),
                cwd=str(self.package_dir),
                capture_output=not verbose,
                text=True,
                check=False
            )
        except FileNotFoundError:
            raise BuildError(127, f"Swift executable not found at '{self.swift_path}'")

        if result.returncode != 0:
            output = "" if verbose else (result.stdout or "") + (result.stderr or "")
            logger.error(f"swift build failed with exit code {result.returncode}")
            raise BuildError(result.returncode, output)

        logger.info("Symbol graphs generated")
