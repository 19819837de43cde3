"""
DocumentationGenerator - turns a directory of symbol graphs into one Markdown file per module.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .. import logger
from ..names import NameResolver
from ..parsers import SymbolGraphLoader, SymbolGraphParseError
from ..result import ModuleResult
from ..symbols import Relationship, RelationshipIndex
from .interface_renderer import InterfaceRenderer
from .markdown_formatter import assemble_module_document, prepare_readme
from .module_structure import ModuleStructure
from .symbol_filter import filter_public_symbols
from .symbol_sorter import SymbolSorter

README_NAME = "README.md"


class DocumentationGenerator:
    """
    Generates `<output_dir>/<Module>.md` for every module found in a symbol graphs directory.

    Each module is processed independently:
    1. Load the main symbol graph and its extension fragments
    2. Keep the public, non-synthesized (and unless asked, non re-exported) symbols
    3. Derive nesting and extension groups from the path components
    4. Order top-level symbols by hierarchy and dependencies, main symbol first
    5. Render the interface and write the Markdown document
    """

    def __init__(
        self,
        symbol_graphs_dir: Path,
        output_dir: Path,
        target_paths: Optional[Dict[str, str]] = None,
        include_reexported: bool = False,
        name_resolver: Optional[NameResolver] = None,
        max_workers: int = 1,
        package_dir: Optional[Path] = None
    ):
        self.loader = SymbolGraphLoader(symbol_graphs_dir)
        self.output_dir = Path(output_dir)
        self.target_paths = dict(target_paths or {})
        self.include_reexported = include_reexported
        self.name_resolver = name_resolver or NameResolver()
        self.max_workers = max(1, max_workers)
        self.package_dir = Path(package_dir) if package_dir else Path.cwd()

    def generate(self, include_only: Optional[Iterable[str]] = None) -> List[ModuleResult]:
        """
        Document every discovered module, or only those named in include_only.

        Returns:
            One ModuleResult per processed module, in module name order

        Raises:
            SymbolGraphDirectoryError: If the symbol graphs directory cannot be read
        """
        self.name_resolver.reset()
        modules = self.loader.discover_modules()

        if include_only is not None:
            wanted = set(include_only)
            missing = sorted(wanted - set(modules))
            if missing:
                logger.warning(f"No symbol graph found for requested modules: {', '.join(missing)}")
            modules = [m for m in modules if m in wanted]

        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Generating documentation for {len(modules)} modules into {self.output_dir}")

        if self.max_workers > 1 and len(modules) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(self.process_module, modules))
        return [self.process_module(module) for module in modules]

    def process_module(self, module_name: str) -> ModuleResult:
        logger.info(f"Processing module: {module_name}")
        try:
            document = self.loader.load_module(module_name)
        except SymbolGraphParseError as e:
            logger.error(f"Cannot load module {module_name}: {e}")
            return ModuleResult.failed(module_name, str(e))

        symbols = filter_public_symbols(document.symbols, module_name, self.include_reexported)
        structure = ModuleStructure(symbols)
        if structure.is_empty:
            logger.info(f"Skipping {module_name} (no public symbols)")
            return ModuleResult.skipped(module_name)

        markdown = self.render_module(module_name, structure, document.relationships)
        output_path = self.output_dir / f"{module_name}.md"
        try:
            output_path.write_text(markdown, encoding='utf-8')
        except OSError as e:
            logger.error(f"Cannot write {output_path}: {e}")
            return ModuleResult.failed(module_name, f"Cannot write {output_path}: {e}")

        logger.info(f"Generated {output_path}")
        return ModuleResult.generated(module_name, output_path)

    def render_module(self, module_name: str, structure: ModuleStructure,
                      relationships: List[Relationship]) -> str:
        index = RelationshipIndex(relationships)
        self._prefetch_names(structure, index)
        renderer = InterfaceRenderer(structure, index, self.name_resolver)

        top_level = structure.top_level
        graph = SymbolSorter.build_dependency_graph(top_level, relationships)
        main_symbol = SymbolSorter.find_main_symbol(top_level, relationships, module_name)
        ordered = SymbolSorter.sort_by_hierarchy(top_level, graph)

        blocks = []
        if main_symbol is not None:
            blocks.append(renderer.render_symbol(main_symbol))
            ordered = [s for s in ordered if s.precise_id != main_symbol.precise_id]
        blocks.append("\n".join(renderer.render_symbol(symbol) for symbol in ordered))

        extensions = []
        for type_name in structure.sorted_extension_types():
            members = structure.extension_groups[type_name]
            members = SymbolSorter.sort_by_hierarchy(
                members, SymbolSorter.build_dependency_graph(members, relationships))
            extensions.append(renderer.render_extension_group(type_name, members))
        blocks.append("\n".join(extensions))

        return assemble_module_document(module_name, self.load_readme(module_name), blocks)

    def _prefetch_names(self, structure: ModuleStructure, index: RelationshipIndex):
        """Resolve every inheritance target of the module in one batch."""
        targets = []
        for symbol in structure.symbols:
            targets.extend(index.inheritance_targets(symbol.precise_id))
        if targets:
            self.name_resolver.resolve_many(targets)

    def readme_path(self, module_name: str) -> Optional[Path]:
        target_path = self.target_paths.get(module_name)
        if not target_path:
            return None
        path = Path(target_path)
        if not path.is_absolute():
            path = self.package_dir / path
        return path / README_NAME

    def load_readme(self, module_name: str) -> Optional[str]:
        """Prepared README body for a module, None if it has none or it cannot be read."""
        path = self.readme_path(module_name)
        if path is None or not path.exists():
            return None
        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Found {path} but couldn't read it: {e}")
            return None
        return prepare_readme(content, module_name) or None
