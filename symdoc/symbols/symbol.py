"""
Symbol classes for representing Swift API entities from symbol graph JSON.
"""

from typing import Any, Dict, List, Tuple

from .symbol_kind import keyword_for


class SymbolGraphParseError(ValueError):
    """Raised when a symbol graph document (or part of one) cannot be decoded."""


def _require(data: Dict[str, Any], key: str, context: str) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise SymbolGraphParseError(f"{context}: missing required field '{key}'")
    return data[key]


class DeclarationToken:
    """
    One fragment of a declaration.

    Attributes:
        kind: Fragment category ("keyword", "identifier", "text", "typeIdentifier", ...)
        text: Literal spelling of the fragment
    """

    def __init__(self, kind: str, text: str):
        self.kind = kind
        self.text = text

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeclarationToken':
        return cls(
            kind=str(_require(data, 'kind', 'declaration fragment')),
            text=str(_require(data, 'spelling', 'declaration fragment')),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, DeclarationToken):
            return NotImplemented
        return self.kind == other.kind and self.text == other.text

    def __hash__(self) -> int:
        return hash((self.kind, self.text))

    def __repr__(self) -> str:
        return f"DeclarationToken({self.kind!r}, {self.text!r})"


class Symbol:
    """
    A single entry of a symbol graph: a type, member, function, macro, etc.

    Symbols are value objects; nesting is derived from path_components, never
    from references to other Symbol objects.

    Attributes:
        precise_id: Globally unique, stable identifier (usually a mangled name)
        kind_identifier: Kind tag such as "swift.class" or "swift.type.method"
        path_components: Name segments from the module root, e.g. ("Cache", "get(_:)")
        title: Display title of the symbol
        declaration_tokens: Declaration fragments in source order
        doc_comment_lines: Lines of the documentation comment (possibly empty)
        access_level: "public", "open", "internal", ...
    """

    def __init__(
        self,
        precise_id: str,
        kind_identifier: str,
        path_components: Tuple[str, ...],
        title: str,
        declaration_tokens: Tuple[DeclarationToken, ...] = (),
        doc_comment_lines: Tuple[str, ...] = (),
        access_level: str = "public"
    ):
        self.precise_id = precise_id
        self.kind_identifier = kind_identifier
        self.path_components = tuple(path_components)
        self.title = title
        self.declaration_tokens = tuple(declaration_tokens)
        self.doc_comment_lines = tuple(doc_comment_lines)
        self.access_level = access_level

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Symbol':
        """
        Build a Symbol from one entry of a symbol graph's "symbols" array.

        Raises:
            SymbolGraphParseError: If a required field is missing or malformed
        """
        identifier = _require(data, 'identifier', 'symbol')
        precise_id = _require(identifier, 'precise', 'symbol identifier')
        context = f"symbol {precise_id}"

        kind = _require(data, 'kind', context)
        path_components = _require(data, 'pathComponents', context)
        names = _require(data, 'names', context)
        if not isinstance(path_components, list) or not path_components:
            raise SymbolGraphParseError(f"{context}: pathComponents must be a non-empty list")

        fragments = data.get('declarationFragments') or []
        doc_comment = data.get('docComment')
        lines = (doc_comment.get('lines') or []) if isinstance(doc_comment, dict) else []

        return cls(
            precise_id=str(precise_id),
            kind_identifier=str(_require(kind, 'identifier', context)),
            path_components=tuple(str(p) for p in path_components),
            title=str(_require(names, 'title', context)),
            declaration_tokens=tuple(DeclarationToken.from_dict(f) for f in fragments),
            doc_comment_lines=tuple(str(_require(line, 'text', context)) for line in lines),
            access_level=str(_require(data, 'accessLevel', context)),
        )

    @property
    def depth(self) -> int:
        return len(self.path_components)

    @property
    def path_key(self) -> str:
        return ".".join(self.path_components)

    @property
    def keyword(self) -> str:
        return keyword_for(self.kind_identifier)

    def __repr__(self) -> str:
        return f"Symbol({self.kind_identifier}: {self.path_key} [{self.precise_id}])"


def symbols_from_list(items: List[Dict[str, Any]]) -> List[Symbol]:
    if not isinstance(items, list):
        raise SymbolGraphParseError("'symbols' must be a list")
    return [Symbol.from_dict(item) for item in items]
