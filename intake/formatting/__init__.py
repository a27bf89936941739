from intake.formatting.formatter import format_blocks, render_blocks
from intake.formatting.models import (
    FormattedBlock,
    Heading,
    ListItem,
    Paragraph,
    Spacer,
    TextRun,
)

__all__ = [
    "FormattedBlock",
    "Heading",
    "ListItem",
    "Paragraph",
    "Spacer",
    "TextRun",
    "format_blocks",
    "render_blocks",
]
