from intake.resolution.models import DOCUMENT_SECTIONS, CanonicalDocument


def render_document_text(document: CanonicalDocument) -> str:
    """Render the document as markdown text for copying or saving."""
    parts: list[str] = []
    if document.title:
        parts.append(f"# {document.title}")
    if document.generated_at:
        parts.append(f"Generated: {document.generated_at}")
    if document.data_sources:
        parts.append(f"Data Sources: {', '.join(document.data_sources)}")
    parts.append("")
    if document.executive_summary:
        parts.extend(["## Executive Summary", document.executive_summary, ""])
    for section in DOCUMENT_SECTIONS:
        content = section.content(document)
        if content:
            parts.extend([f"## {section.title}", content, ""])
    if document.open_questions:
        parts.append("## Needs Clarification")
        for number, item in enumerate(document.open_questions, start=1):
            parts.append(
                f"{number}. [{item.display_priority}] {item.display_category}: "
                f"{item.display_description}"
            )
    return "\n".join(parts)
