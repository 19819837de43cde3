"""
Symbol graph file loading.
"""

from .symbol_graph_loader import (
    SymbolGraphLoader,
    SymbolGraphDirectoryError,
    SYMBOL_GRAPH_SUFFIX,
)
from ..symbols import SymbolGraphParseError

__all__ = ['SymbolGraphLoader', 'SymbolGraphDirectoryError', 'SymbolGraphParseError',
           'SYMBOL_GRAPH_SUFFIX']
