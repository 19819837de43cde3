"""
Symbol kind enumeration for type-safe symbol classification.
"""

from enum import Enum


class SymbolKind(Enum):
    """Kind identifiers emitted by the Swift compiler in symbol graphs."""
    CLASS = "swift.class"
    STRUCT = "swift.struct"
    ENUM = "swift.enum"
    PROTOCOL = "swift.protocol"
    ACTOR = "swift.actor"
    EXTENSION = "swift.extension"
    MACRO = "swift.macro"
    FUNCTION = "swift.func"
    VARIABLE = "swift.var"
    TYPEALIAS = "swift.typealias"
    ASSOCIATED_TYPE = "swift.associatedtype"
    ENUM_CASE = "swift.enum.case"
    PROPERTY = "swift.property"
    TYPE_PROPERTY = "swift.type.property"
    METHOD = "swift.method"
    TYPE_METHOD = "swift.type.method"
    INIT = "swift.init"
    SUBSCRIPT = "swift.subscript"
    TYPE_SUBSCRIPT = "swift.type.subscript"


# Kinds that own a `{ ... }` body with members
CONTAINER_KINDS = frozenset({
    SymbolKind.CLASS.value,
    SymbolKind.STRUCT.value,
    SymbolKind.ENUM.value,
    SymbolKind.PROTOCOL.value,
    SymbolKind.ACTOR.value,
    SymbolKind.EXTENSION.value,
})

# Kinds rendered in the nested-type group of their parent
NESTED_TYPE_KINDS = frozenset({
    SymbolKind.CLASS.value,
    SymbolKind.STRUCT.value,
    SymbolKind.ENUM.value,
    SymbolKind.PROTOCOL.value,
    SymbolKind.ACTOR.value,
    SymbolKind.TYPEALIAS.value,
    SymbolKind.ASSOCIATED_TYPE.value,
})

# Protocols carry their inheritance in the declaration fragments already
INHERITANCE_KINDS = frozenset({
    SymbolKind.CLASS.value,
    SymbolKind.STRUCT.value,
    SymbolKind.ENUM.value,
})

# Keyword used when a symbol has no declaration fragments
_KEYWORDS = {
    SymbolKind.CLASS.value: "class",
    SymbolKind.STRUCT.value: "struct",
    SymbolKind.ENUM.value: "enum",
    SymbolKind.PROTOCOL.value: "protocol",
    SymbolKind.ACTOR.value: "actor",
    SymbolKind.EXTENSION.value: "extension",
    SymbolKind.MACRO.value: "macro",
    SymbolKind.FUNCTION.value: "func",
    SymbolKind.METHOD.value: "func",
    SymbolKind.TYPE_METHOD.value: "static func",
    SymbolKind.VARIABLE.value: "var",
    SymbolKind.PROPERTY.value: "var",
    SymbolKind.TYPE_PROPERTY.value: "static var",
    SymbolKind.TYPEALIAS.value: "typealias",
    SymbolKind.ASSOCIATED_TYPE.value: "associatedtype",
    SymbolKind.ENUM_CASE.value: "case",
    SymbolKind.INIT.value: "",
    SymbolKind.SUBSCRIPT.value: "",
    SymbolKind.TYPE_SUBSCRIPT.value: "static",
}


def is_container_kind(identifier: str) -> bool:
    return identifier in CONTAINER_KINDS


def is_nested_type_kind(identifier: str) -> bool:
    return identifier in NESTED_TYPE_KINDS


def takes_inheritance_clause(identifier: str) -> bool:
    return identifier in INHERITANCE_KINDS


def is_type_property(identifier: str) -> bool:
    return "type.property" in identifier


def is_instance_property(identifier: str) -> bool:
    return "property" in identifier and not is_type_property(identifier)


def is_enum_case(identifier: str) -> bool:
    return identifier == SymbolKind.ENUM_CASE.value


def is_type_method(identifier: str) -> bool:
    return "type.method" in identifier or "type.subscript" in identifier


def is_instance_method(identifier: str) -> bool:
    """Methods, initializers and subscripts that belong to an instance."""
    if is_type_method(identifier):
        return False
    return "method" in identifier or "init" in identifier or "subscript" in identifier


def is_function_like(identifier: str) -> bool:
    """Anything callable: methods, free functions, initializers, subscripts."""
    return is_type_method(identifier) or is_instance_method(identifier) or "func" in identifier


def keyword_for(identifier: str) -> str:
    """Declaration keyword for a kind, falling back to the last identifier segment."""
    if identifier in _KEYWORDS:
        return _KEYWORDS[identifier]
    return identifier.rsplit(".", 1)[-1]
