"""
Markdown generation from symbol graphs.

Filtering, structure, ordering and rendering of a module's public interface.
"""

from .symbol_filter import filter_public_symbols, is_reexported_symbol
from .module_structure import ModuleStructure
from .symbol_sorter import SymbolSorter
from .declaration_formatter import format_declaration, format_doc_comment
from .markdown_formatter import adjust_heading_levels, prepare_readme, strip_module_title
from .interface_renderer import InterfaceRenderer, NOISE_CONFORMANCES
from .documentation_generator import DocumentationGenerator

__all__ = [
    'filter_public_symbols',
    'is_reexported_symbol',
    'ModuleStructure',
    'SymbolSorter',
    'format_declaration',
    'format_doc_comment',
    'adjust_heading_levels',
    'prepare_readme',
    'strip_module_title',
    'InterfaceRenderer',
    'NOISE_CONFORMANCES',
    'DocumentationGenerator',
]
