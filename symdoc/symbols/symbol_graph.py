"""
SymbolGraphDocument - one decoded symbol graph file.
"""

import json
from typing import Any, Dict, Iterable, List

from .symbol import Symbol, SymbolGraphParseError, symbols_from_list
from .relationship import Relationship, relationships_from_list


class SymbolGraphDocument:
    """
    Decoded contents of one `<Module>.symbols.json` or `<Module>@<Other>.symbols.json` file.

    Attributes:
        module_name: Name from the document's "module" object
        symbols: Symbols in document order
        relationships: Relationships in document order (empty if the file has none)
    """

    def __init__(self, module_name: str, symbols: List[Symbol], relationships: List[Relationship]):
        self.module_name = module_name
        self.symbols = list(symbols)
        self.relationships = list(relationships)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SymbolGraphDocument':
        """
        Build a document from decoded JSON.

        Raises:
            SymbolGraphParseError: If the structure doesn't match the symbol graph schema
        """
        if not isinstance(data, dict):
            raise SymbolGraphParseError("symbol graph root must be a JSON object")

        module = data.get('module')
        if not isinstance(module, dict) or 'name' not in module:
            raise SymbolGraphParseError("symbol graph is missing 'module.name'")
        if 'symbols' not in data:
            raise SymbolGraphParseError("symbol graph is missing 'symbols'")

        return cls(
            module_name=str(module['name']),
            symbols=symbols_from_list(data['symbols']),
            relationships=relationships_from_list(data.get('relationships') or []),
        )

    @classmethod
    def from_json(cls, text: str) -> 'SymbolGraphDocument':
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SymbolGraphParseError(f"invalid JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def merged(cls, main: 'SymbolGraphDocument',
               fragments: Iterable['SymbolGraphDocument']) -> 'SymbolGraphDocument':
        """Concatenate the main document with its extension fragments (main first)."""
        symbols = list(main.symbols)
        relationships = list(main.relationships)
        for fragment in fragments:
            symbols.extend(fragment.symbols)
            relationships.extend(fragment.relationships)
        return cls(main.module_name, symbols, relationships)

    def __repr__(self) -> str:
        return (f"SymbolGraphDocument({self.module_name}: {len(self.symbols)} symbols, "
                f"{len(self.relationships)} relationships)")
