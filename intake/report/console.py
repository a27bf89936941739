"""Terminal rendering of an intake document."""

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from intake.formatting.formatter import format_blocks
from intake.formatting.models import FormattedBlock, Heading, ListItem, Paragraph, TextRun
from intake.resolution.models import DOCUMENT_SECTIONS, CanonicalDocument, OpenQuestion

_HEADING_STYLES = {1: "bold underline", 2: "bold", 3: "bold italic"}
_PRIORITY_STYLES = {"high": "red", "medium": "yellow"}


def _styled(runs: tuple[TextRun, ...], base_style: str = "") -> Text:
    text = Text(style=base_style)
    for run in runs:
        text.append(run.text, style="bold" if run.emphasized else None)
    return text


def render_blocks_rich(blocks: list[FormattedBlock]) -> list[Text]:
    """Turn formatter blocks into rich lines.

    Consecutive ordered items are numbered from 1; any other block restarts
    the count.
    """
    lines: list[Text] = []
    number = 0
    for block in blocks:
        if isinstance(block, ListItem) and block.ordered:
            number += 1
            line = Text(f"  {number}. ")
            line.append_text(_styled(block.runs))
            lines.append(line)
            continue
        number = 0
        if isinstance(block, Heading):
            lines.append(_styled(block.runs, _HEADING_STYLES[block.level]))
        elif isinstance(block, ListItem):
            line = Text("  • ")
            line.append_text(_styled(block.runs))
            lines.append(line)
        elif isinstance(block, Paragraph):
            lines.append(_styled(block.runs))
        else:
            lines.append(Text(""))
    return lines


class DocumentPrinter:
    """Prints a CanonicalDocument to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, document: CanonicalDocument) -> None:
        self.console.print(self._header(document))
        if document.executive_summary:
            summary = Group(*render_blocks_rich(format_blocks(document.executive_summary)))
            self.console.print(Panel(summary, title="Executive Summary"))
        for section in DOCUMENT_SECTIONS:
            content = section.content(document)
            if not content:
                continue
            body = Group(*render_blocks_rich(format_blocks(content)))
            self.console.print(Panel(body, title=section.title, title_align="left"))
        if document.open_questions:
            self.console.print(self._clarifications(document.open_questions))

    def _header(self, document: CanonicalDocument) -> RenderableType:
        header = Text(document.title or "Project Intake Document", style="bold")
        meta = [
            value
            for value in (
                f"Generated: {document.generated_at}" if document.generated_at else "",
                f"Status: {document.processing_status}" if document.processing_status else "",
            )
            if value
        ]
        if meta:
            header.append("\n" + "  |  ".join(meta), style="dim")
        if document.data_sources:
            header.append("\nSources: " + ", ".join(document.data_sources), style="dim")
        return header

    def _clarifications(self, items: list[OpenQuestion]) -> RenderableType:
        count = f"{len(items)} {'item' if len(items) == 1 else 'items'}"
        table = Table(title=f"Needs Clarification ({count})", show_lines=False)
        table.add_column("Priority")
        table.add_column("Category")
        table.add_column("Description")
        for item in items:
            style = _PRIORITY_STYLES.get(item.display_priority.lower(), "blue")
            table.add_row(
                Text(item.display_priority, style=style),
                item.display_category,
                item.display_description,
            )
        return table
