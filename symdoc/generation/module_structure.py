"""
ModuleStructure - nesting derived from the path components of a flat symbol list.
"""

from typing import Dict, List, Tuple

from ..symbols import Symbol


class ModuleStructure:
    """
    Immutable index over a module's retained symbols.

    Attributes:
        top_level: Symbols with a single path component, in input order
        by_path: Path key -> symbol (first occurrence wins)
        extension_groups: Extended type name -> direct members added to a type
            this module does not define, in input order
    """

    def __init__(self, symbols: List[Symbol]):
        self.symbols = list(symbols)
        self.top_level: List[Symbol] = []
        self.by_path: Dict[str, Symbol] = {}
        self._children: Dict[Tuple[str, ...], List[Symbol]] = {}
        self.extension_groups: Dict[str, List[Symbol]] = {}
        self._build()

    def _build(self):
        for symbol in self.symbols:
            self.by_path.setdefault(symbol.path_key, symbol)
            if symbol.depth == 1:
                self.top_level.append(symbol)
            else:
                self._children.setdefault(symbol.path_components[:-1], []).append(symbol)

        local_types = {symbol.path_components[0] for symbol in self.top_level}
        for symbol in self.symbols:
            parent = symbol.path_components[0]
            # Deeper members of external types are not rendered
            if symbol.depth == 2 and parent not in local_types:
                self.extension_groups.setdefault(parent, []).append(symbol)

    def children_of(self, path_components: Tuple[str, ...]) -> List[Symbol]:
        """Direct children of a path, overloads included, in input order."""
        return self._children.get(tuple(path_components), [])

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render for the module."""
        return not self.top_level and not self.extension_groups

    def sorted_extension_types(self) -> List[str]:
        return sorted(self.extension_groups)
