"""
Symbol graph data model.

Value objects for the symbols and relationships in a Swift symbol graph, plus
the kind helpers used to classify them.
"""

from .symbol_kind import SymbolKind
from .symbol import Symbol, DeclarationToken, SymbolGraphParseError
from .relationship import Relationship, RelationshipKind, RelationshipIndex
from .symbol_graph import SymbolGraphDocument

__all__ = [
    'SymbolKind',
    'Symbol',
    'DeclarationToken',
    'SymbolGraphParseError',
    'Relationship',
    'RelationshipKind',
    'RelationshipIndex',
    'SymbolGraphDocument',
]
