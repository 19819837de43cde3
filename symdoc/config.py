from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Set, Union

from .tool_config import ToolConfig

DEFAULT_SYMBOL_GRAPHS_DIR = ".build/symbol-graphs"
DEFAULT_OUTPUT_DIR = "docs"


def parse_modules(value: Union[None, str, Iterable[str]]) -> Optional[Set[str]]:
    """Module filter from a comma-separated string or a list; None or empty means all."""
    if value is None:
        return None
    items = value.split(",") if isinstance(value, str) else value
    modules = {str(item).strip() for item in items if str(item).strip()}
    return modules or None


class GenerationConfig:
    """Settings for one documentation run."""

    def __init__(
        self,
        symbol_graphs_dir: Union[str, Path] = DEFAULT_SYMBOL_GRAPHS_DIR,
        output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
        modules: Union[None, str, Iterable[str]] = None,
        generate_only: bool = False,
        verbose: bool = False,
        be_lenient: bool = False,
        include_reexported: bool = False,
        package_dir: Union[str, Path] = ".",
        max_workers: Optional[int] = None
    ):
        self.package_dir = Path(package_dir)
        self.symbol_graphs_dir = self._in_package(symbol_graphs_dir)
        self.output_dir = self._in_package(output_dir)
        self.modules = parse_modules(modules)
        self.generate_only = generate_only
        self.verbose = verbose
        self.be_lenient = be_lenient
        self.include_reexported = include_reexported
        self.max_workers = max_workers if max_workers is not None else ToolConfig().max_workers
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    def _in_package(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.package_dir / path

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GenerationConfig':
        """Build a config from a JSON request body; unknown keys are rejected."""
        allowed = {
            'symbol_graphs_dir', 'output_dir', 'modules', 'generate_only', 'verbose',
            'be_lenient', 'include_reexported', 'package_dir', 'max_workers',
        }
        unknown = set(data) - allowed
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'symbol_graphs_dir': str(self.symbol_graphs_dir),
            'output_dir': str(self.output_dir),
            'modules': sorted(self.modules) if self.modules else None,
            'generate_only': self.generate_only,
            'verbose': self.verbose,
            'be_lenient': self.be_lenient,
            'include_reexported': self.include_reexported,
            'package_dir': str(self.package_dir),
            'max_workers': self.max_workers,
        }
