"""
Loader for Swift symbol graph files emitted by `swift build -emit-symbol-graph`.
"""

from pathlib import Path
from typing import List, Optional

from .. import logger
from ..symbols import SymbolGraphDocument, SymbolGraphParseError

SYMBOL_GRAPH_SUFFIX = ".symbols.json"
FRAGMENT_SEPARATOR = "@"


class SymbolGraphDirectoryError(OSError):
    """Raised when the symbol graphs directory cannot be listed."""


class SymbolGraphLoader:
    """
    Reads the symbol graph documents of a directory.

    A module is described by one main file, `<Module>.symbols.json`, and zero or
    more extension fragments, `<Module>@<Other>.symbols.json`, that add members
    to types declared in other modules.
    """

    def __init__(self, symbol_graphs_dir: Path):
        self.symbol_graphs_dir = Path(symbol_graphs_dir)

    def _list_files(self) -> List[str]:
        try:
            return sorted(p.name for p in self.symbol_graphs_dir.iterdir() if p.is_file())
        except OSError as e:
            raise SymbolGraphDirectoryError(
                f"Cannot read symbol graphs directory {self.symbol_graphs_dir}: {e}"
            ) from e

    @staticmethod
    def main_file_name(module_name: str) -> str:
        return f"{module_name}{SYMBOL_GRAPH_SUFFIX}"

    @staticmethod
    def module_name_for(file_name: str) -> Optional[str]:
        """Module name for a main file, None for fragments and unrelated files."""
        if not file_name.endswith(SYMBOL_GRAPH_SUFFIX) or FRAGMENT_SEPARATOR in file_name:
            return None
        return file_name[:-len(SYMBOL_GRAPH_SUFFIX)]

    def discover_modules(self) -> List[str]:
        """
        List the modules that have a main symbol graph file.

        Raises:
            SymbolGraphDirectoryError: If the directory is missing or unreadable
        """
        modules = []
        for file_name in self._list_files():
            module_name = self.module_name_for(file_name)
            if module_name:
                modules.append(module_name)
        logger.debug(f"Discovered {len(modules)} modules in {self.symbol_graphs_dir}")
        return modules

    def fragment_files(self, module_name: str) -> List[Path]:
        """Extension fragment files for a module, sorted by file name."""
        prefix = f"{module_name}{FRAGMENT_SEPARATOR}"
        return [
            self.symbol_graphs_dir / name
            for name in self._list_files()
            if name.startswith(prefix) and name.endswith(SYMBOL_GRAPH_SUFFIX)
        ]

    @staticmethod
    def load_document(file_path: Path) -> SymbolGraphDocument:
        """
        Decode a single symbol graph file.

        Raises:
            SymbolGraphParseError: If the file is missing, unreadable or not a valid symbol graph
        """
        try:
            text = Path(file_path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise SymbolGraphParseError(f"Cannot read {file_path}: {e}") from e

        try:
            return SymbolGraphDocument.from_json(text)
        except SymbolGraphParseError as e:
            raise SymbolGraphParseError(f"{Path(file_path).name}: {e}") from e

    def load_module(self, module_name: str) -> SymbolGraphDocument:
        """
        Load a module's main document merged with all of its extension fragments.

        Fragments that fail to parse are skipped with a warning.

        Raises:
            SymbolGraphParseError: If the main document is missing or cannot be decoded
        """
        main_path = self.symbol_graphs_dir / self.main_file_name(module_name)
        main = self.load_document(main_path)

        fragments = []
        for fragment_path in self.fragment_files(module_name):
            try:
                fragments.append(self.load_document(fragment_path))
            except SymbolGraphParseError as e:
                logger.warning(f"Skipping extension fragment {fragment_path.name}: {e}")

        document = SymbolGraphDocument.merged(main, fragments)
        logger.info(
            f"Loaded module {module_name}: {len(document.symbols)} symbols, "
            f"{len(document.relationships)} relationships, {len(fragments)} fragments"
        )
        return document
