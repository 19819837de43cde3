"""
InterfaceRenderer - Swift-like interface text for symbols and extension groups.
"""

from typing import Callable, Dict, List, Optional, Tuple

from ..names import NameResolver
from ..symbols import RelationshipIndex, Symbol
from ..symbols.symbol_kind import (
    is_container_kind,
    is_enum_case,
    is_function_like,
    is_instance_method,
    is_instance_property,
    is_nested_type_kind,
    is_type_method,
    is_type_property,
    takes_inheritance_clause,
)
from .declaration_formatter import format_declaration, format_doc_comment
from .module_structure import ModuleStructure

INDENT = "  "

# Conformances every type has or that say nothing about the API
NOISE_CONFORMANCES = frozenset({
    "CVarArg",
    "Hashable",
    "Equatable",
    "Copyable",
    "CustomStringConvertible",
    "CustomDebugStringConvertible",
})

# Member groups of a container, in rendering order
MEMBER_GROUPS: List[Tuple[str, Callable[[str], bool]]] = [
    ("type properties", is_type_property),
    ("instance properties", is_instance_property),
    ("enum cases", is_enum_case),
    ("type methods", is_type_method),
    ("instance methods", is_instance_method),
]


def _by_title(symbols: List[Symbol]) -> List[Symbol]:
    return sorted(symbols, key=lambda s: s.title)


class InterfaceRenderer:
    """
    Renders one module's symbols.

    Rendering is a pure function of the module structure, the relationships and
    the names the resolver returns.
    """

    def __init__(self, structure: ModuleStructure, relationships: RelationshipIndex,
                 name_resolver: NameResolver):
        self.structure = structure
        self.relationships = relationships
        self.name_resolver = name_resolver

    def inheritance_names(self, symbol: Symbol) -> List[str]:
        """Resolved supertypes and conformances, noise and duplicates removed, in relationship order."""
        targets = self.relationships.inheritance_targets(symbol.precise_id)
        resolved: Dict[str, Optional[str]] = self.name_resolver.resolve_many(targets)

        names = []
        for target in targets:
            name = resolved.get(target)
            if name and name not in NOISE_CONFORMANCES and name not in names:
                names.append(name)
        return names

    @staticmethod
    def declaration_line(symbol: Symbol) -> str:
        if symbol.declaration_tokens:
            return format_declaration(symbol.declaration_tokens, add_public=True)
        return " ".join(part for part in ("public", symbol.keyword, symbol.title) if part)

    def _render_member(self, member: Symbol, indent: str) -> str:
        return format_doc_comment(member.doc_comment_lines, indent) + f"{indent}{self.declaration_line(member)}\n"

    def render_symbol(self, symbol: Symbol, indent: str = "") -> str:
        """
        Render a symbol with its doc comment and, for containers, its members.

        Nested types are rendered recursively; other members are grouped by kind
        and sorted by title within each group.
        """
        declaration = self.declaration_line(symbol)
        if takes_inheritance_clause(symbol.kind_identifier):
            inherited = self.inheritance_names(symbol)
            if inherited:
                declaration += ": " + ", ".join(inherited)

        result = format_doc_comment(symbol.doc_comment_lines, indent)
        if not is_container_kind(symbol.kind_identifier):
            return result + f"{indent}{declaration}\n"

        result += f"{indent}{declaration} {{\n"
        children = self.structure.children_of(symbol.path_components)
        member_indent = indent + INDENT
        rendered = [self.render_symbol(child, member_indent)
                    for child in _by_title([c for c in children if is_nested_type_kind(c.kind_identifier)])]

        for _, belongs in MEMBER_GROUPS:
            group = [c for c in children if not is_nested_type_kind(c.kind_identifier) and belongs(c.kind_identifier)]
            rendered.extend(self._render_member(member, member_indent) for member in _by_title(group))

        result += "\n".join(rendered)
        result += f"{indent}}}\n"
        return result

    def render_extension_group(self, type_name: str, members: List[Symbol]) -> str:
        """Render members added to an external type: properties, then methods."""
        properties = [m for m in members if "property" in m.kind_identifier]
        methods = [m for m in members if "property" not in m.kind_identifier and is_function_like(m.kind_identifier)]

        rendered = [self._render_member(member, INDENT)
                    for member in _by_title(properties) + _by_title(methods)]
        return f"extension {type_name} {{\n" + "\n".join(rendered) + "}\n"
