"""
Swift package tooling: validation, package description and symbol graph builds.
"""

from .package_validator import PackageValidator, PackageValidationError
from .package_info_provider import PackageInfoProvider, PackageInfoError
from .symbol_graph_builder import SymbolGraphBuilder, BuildError

__all__ = ['PackageValidator', 'PackageValidationError', 'PackageInfoProvider', 'PackageInfoError',
           'SymbolGraphBuilder', 'BuildError']
