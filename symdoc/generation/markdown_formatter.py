"""
Markdown helpers: README preparation and module document assembly.
"""

import re
from datetime import datetime
from typing import List, Optional

# Heading level of the README's top headings once nested under "## Module"
TARGET_HEADING_LEVEL = 3
MAX_HEADING_LEVEL = 6

_HEADING_RE = re.compile(r"^(#{1,6}) (.*)$")
_FENCE_PREFIXES = ("```", "~~~")

GENERATOR_NAME = "symdoc"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def _heading_levels(lines: List[str]) -> List[Optional[int]]:
    """Heading level per line, None for lines that are not headings or sit in a code fence."""
    levels = []
    in_fence = False
    for line in lines:
        trimmed = line.strip()
        if trimmed.startswith(_FENCE_PREFIXES):
            in_fence = not in_fence
            levels.append(None)
            continue
        match = None if in_fence else _HEADING_RE.match(trimmed)
        levels.append(len(match.group(1)) if match else None)
    return levels


def adjust_heading_levels(markdown: str) -> str:
    """
    Shift all headings so the highest one becomes level 3, capped at level 6.

    Markdown without headings is returned unchanged.
    """
    lines = markdown.split("\n")
    levels = _heading_levels(lines)
    present = [level for level in levels if level is not None]
    if not present:
        return markdown

    shift = TARGET_HEADING_LEVEL - min(present)
    if shift == 0:
        return markdown

    result = []
    for line, level in zip(lines, levels):
        if level is None:
            result.append(line)
            continue
        content = line.strip()[level:].strip()
        new_level = min(level + shift, MAX_HEADING_LEVEL)
        result.append(f"{'#' * new_level} {content}")
    return "\n".join(result)


def strip_module_title(readme: str, module_name: str) -> str:
    """Drop a leading `# <module>` line that would repeat the module heading."""
    lines = readme.split("\n")
    if len(lines) > 1 and lines[0].strip() == f"# {module_name}":
        return "\n".join(lines[1:]).strip()
    return readme


def prepare_readme(readme: str, module_name: str) -> str:
    return adjust_heading_levels(strip_module_title(readme, module_name)).strip()


def swift_block(body: str) -> str:
    return f"```swift\n{body}```\n\n"


def generated_footer(now: Optional[datetime] = None) -> str:
    now = now or datetime.now().astimezone()
    return f"<!-- Generated by {GENERATOR_NAME} on {now.strftime(TIMESTAMP_FORMAT)} -->\n"


def assemble_module_document(module_name: str, readme: Optional[str], blocks: List[str],
                             now: Optional[datetime] = None) -> str:
    """
    Build the final Markdown for a module.

    Args:
        module_name: Module being documented
        readme: Prepared README body, or None
        blocks: Contents of the swift code blocks in output order; empty ones are dropped
        now: Timestamp for the footer (defaults to the current local time)
    """
    parts = [f"## Module `{module_name}`\n\n"]
    if readme:
        parts.append(readme + "\n\n")

    blocks = [block for block in blocks if block]
    if blocks:
        parts.append("### Public interface\n\n")
        parts.extend(swift_block(block) for block in blocks)

    parts.append(generated_footer(now))
    return "".join(parts)
