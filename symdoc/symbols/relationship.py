"""
Relationship edges between symbols.
"""

from typing import Any, Dict, Iterable, List

from .symbol import SymbolGraphParseError


class RelationshipKind:
    INHERITS_FROM = "inheritsFrom"
    CONFORMS_TO = "conformsTo"


class Relationship:
    """
    A directed edge from source_id to target_id.

    The target may name a symbol that is not part of the loaded graph (a
    standard library protocol, another module's class, ...).
    """

    def __init__(self, kind: str, source_id: str, target_id: str):
        self.kind = kind
        self.source_id = source_id
        self.target_id = target_id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Relationship':
        try:
            return cls(
                kind=str(data['kind']),
                source_id=str(data['source']),
                target_id=str(data['target']),
            )
        except (KeyError, TypeError) as e:
            raise SymbolGraphParseError(f"relationship: missing required field {e}") from e

    @property
    def is_inheritance(self) -> bool:
        return self.kind == RelationshipKind.INHERITS_FROM

    @property
    def is_inheritance_or_conformance(self) -> bool:
        return self.kind in (RelationshipKind.INHERITS_FROM, RelationshipKind.CONFORMS_TO)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Relationship):
            return NotImplemented
        return (self.kind, self.source_id, self.target_id) == (other.kind, other.source_id, other.target_id)

    def __hash__(self) -> int:
        return hash((self.kind, self.source_id, self.target_id))

    def __repr__(self) -> str:
        return f"Relationship({self.source_id} -{self.kind}-> {self.target_id})"


class RelationshipIndex:
    """Relationships grouped by source ID, preserving input order."""

    def __init__(self, relationships: Iterable[Relationship]):
        self.relationships: List[Relationship] = list(relationships)
        self._by_source: Dict[str, List[Relationship]] = {}
        for relationship in self.relationships:
            self._by_source.setdefault(relationship.source_id, []).append(relationship)

    def from_source(self, source_id: str) -> List[Relationship]:
        return self._by_source.get(source_id, [])

    def inheritance_targets(self, source_id: str) -> List[str]:
        """Targets of inheritsFrom/conformsTo edges leaving source_id, in order."""
        return [r.target_id for r in self.from_source(source_id) if r.is_inheritance_or_conformance]

    def __iter__(self):
        return iter(self.relationships)

    def __len__(self) -> int:
        return len(self.relationships)


def relationships_from_list(items: List[Dict[str, Any]]) -> List[Relationship]:
    if not isinstance(items, list):
        raise SymbolGraphParseError("'relationships' must be a list")
    return [Relationship.from_dict(item) for item in items]
