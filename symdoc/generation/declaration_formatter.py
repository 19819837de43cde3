"""
Text formatting of declarations and documentation comments.
"""

from typing import Iterable, Union

from ..symbols import DeclarationToken

# Attributes that add noise to a public interface listing
DROPPED_TOKENS = frozenset({"nonisolated", "@MainActor"})

PARAMETERS_HEADERS = ("- Parameters:", "-Parameters:")


def _token_text(token: Union[DeclarationToken, str]) -> str:
    if isinstance(token, DeclarationToken):
        return token.text
    return str(token)


def format_declaration(tokens: Iterable[Union[DeclarationToken, str]], add_public: bool = True) -> str:
    """
    Join declaration fragments into one line.

    Args:
        tokens: Declaration fragments (or their raw spellings)
        add_public: Prefix "public " unless the declaration already starts with "public"

    Returns:
        The declaration text
    """
    declaration = "".join(
        text for text in map(_token_text, tokens) if text.strip() not in DROPPED_TOKENS
    )
    if add_public and not declaration.startswith("public"):
        declaration = "public " + declaration
    return declaration


def format_doc_comment(lines: Iterable[str], indent: str = "") -> str:
    """
    Render documentation lines as `///` comments.

    A `- Parameters:` section is left out, since parameters are visible in the
    declaration itself. The section ends at the next `-` bullet without a colon.
    """
    result = []
    in_parameters = False

    for text in lines:
        trimmed = text.strip()
        if trimmed.startswith(PARAMETERS_HEADERS):
            in_parameters = True
            continue

        if in_parameters:
            if trimmed.startswith("-") and ":" not in trimmed:
                in_parameters = False
            else:
                continue

        result.append(f"{indent}/// {text}\n")

    return "".join(result)
