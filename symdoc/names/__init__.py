"""
Type name resolution: fixed tables, a bounded cache and the swift demangler.
"""

from .name_cache import NameCache
from .name_resolver import BatchResolver, NameResolver, NullResolver, BUILTIN_NAMES, resolve_builtin
from .demangler import SwiftDemangler

__all__ = ['NameCache', 'BatchResolver', 'NameResolver', 'NullResolver', 'SwiftDemangler',
           'BUILTIN_NAMES', 'resolve_builtin']
