"""Line-oriented formatter for the markdown-like text the agent writes into sections."""

import re
from collections.abc import Iterable

from intake.formatting.models import FormattedBlock, Heading, ListItem, Paragraph, Spacer

_HEADING_PREFIXES: tuple[tuple[str, int], ...] = (
    ("### ", 3),
    ("## ", 2),
    ("# ", 1),
)
_BULLET_PREFIXES = ("- ", "* ")
_NUMBERED = re.compile(r"^\d+\.\s")


def format_blocks(source: str) -> list[FormattedBlock]:
    """Classify every line of ``source`` into a typed block, preserving order.

    Never fails. An empty string yields no blocks.
    """
    if not source:
        return []
    return [_classify(line) for line in source.split("\n")]


def render_blocks(blocks: Iterable[FormattedBlock]) -> str:
    """Write blocks back out as source lines.

    Ordered list items are written as ``1.`` because the original numeral is
    not kept. Formatting the result yields the same blocks.
    """
    lines: list[str] = []
    for block in blocks:
        if isinstance(block, Heading):
            lines.append(f"{'#' * block.level} {block.text}")
        elif isinstance(block, ListItem):
            lines.append(f"{'1.' if block.ordered else '-'} {block.text}")
        elif isinstance(block, Paragraph):
            lines.append(block.text)
        else:
            lines.append("")
    return "\n".join(lines)


def _classify(line: str) -> FormattedBlock:
    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return Heading(level=level, text=line[len(prefix):])
    if line.startswith(_BULLET_PREFIXES):
        return ListItem(ordered=False, text=line[2:])
    match = _NUMBERED.match(line)
    if match:
        return ListItem(ordered=True, text=line[match.end():])
    if not line.strip():
        return Spacer()
    return Paragraph(text=line)
