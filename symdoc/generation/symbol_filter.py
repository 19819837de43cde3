"""
Access level and re-export filtering of a module's symbols.
"""

from typing import Iterable, List

from ..symbols import Symbol

PUBLIC_ACCESS_LEVELS = frozenset({"public", "open"})
SYNTHESIZED_MARKER = "::SYNTHESIZED::"

# Mangling marker for types imported from Objective-C
OBJC_BRIDGING_MARKER = "So"


def mangled_module_name(module_name: str) -> str:
    """The length-prefixed form a module name takes inside a Swift mangled identifier."""
    return f"{len(module_name)}{module_name}"


def is_reexported_symbol(precise_id: str, module_name: str) -> bool:
    """
    Whether a symbol comes from another module and is only visible through this one.

    C and Objective-C symbols (`c:` identifiers) are always re-exported. Swift
    identifiers that carry the Objective-C bridging marker are re-exported
    unless they also carry this module's own mangled name.
    """
    if precise_id.startswith("c:"):
        return True
    if precise_id.startswith("s:") and OBJC_BRIDGING_MARKER in precise_id:
        return mangled_module_name(module_name) not in precise_id
    return False


def is_synthesized(precise_id: str) -> bool:
    return SYNTHESIZED_MARKER in precise_id


def filter_public_symbols(symbols: Iterable[Symbol], module_name: str,
                          include_reexported: bool = False) -> List[Symbol]:
    """
    Keep public/open, non-synthesized symbols in input order.

    Re-exported symbols are dropped unless include_reexported is set. When the
    same precise identifier appears more than once the first occurrence wins.
    """
    retained = []
    seen = set()
    for symbol in symbols:
        if symbol.access_level not in PUBLIC_ACCESS_LEVELS:
            continue
        if is_synthesized(symbol.precise_id):
            continue
        if not include_reexported and is_reexported_symbol(symbol.precise_id, module_name):
            continue
        if symbol.precise_id in seen:
            continue
        seen.add(symbol.precise_id)
        retained.append(symbol)
    return retained
