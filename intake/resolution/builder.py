"""Builds a CanonicalDocument from whatever object the agent sent back.

Nothing here rejects a payload: fields of the wrong type stay absent.
"""

from collections.abc import Mapping
from typing import Any

from intake.resolution.models import CanonicalDocument, OpenQuestion

_TEXT_FIELDS: dict[str, str] = {
    "document_title": "title",
    "generation_date": "generated_at",
    "executive_summary": "executive_summary",
    "problem_statement": "problem_statement",
    "project_goals": "goals",
    "success_criteria": "success_criteria",
    "stakeholder_map": "stakeholder_map",
    "project_scope": "scope",
    "technical_requirements": "technical_requirements",
    "timeline_milestones": "timeline",
    "resource_needs": "resource_needs",
    "processing_status": "processing_status",
}


def build_document(candidate: Any) -> CanonicalDocument:
    """Map wire keys onto a CanonicalDocument, keeping the candidate in ``raw``.

    A candidate that is not an object yields a document with every field absent.
    """
    if not isinstance(candidate, Mapping):
        return CanonicalDocument(raw=candidate)
    fields: dict[str, Any] = {
        attribute: _text(candidate.get(key)) for key, attribute in _TEXT_FIELDS.items()
    }
    return CanonicalDocument(
        **fields,
        data_sources=_data_sources(candidate.get("data_sources")),
        open_questions=_open_questions(candidate.get("needs_clarification")),
        raw=candidate,
    )


def _text(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return None


def _data_sources(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        return []
    return [source for source in (_text(item) for item in raw) if source is not None]


def _open_questions(raw: Any) -> list[OpenQuestion]:
    if not isinstance(raw, list):
        return []
    return [_open_question(item) for item in raw]


def _open_question(raw: Any) -> OpenQuestion:
    if not isinstance(raw, Mapping):
        return OpenQuestion()
    return OpenQuestion(
        priority=_text(raw.get("priority")),
        category=_text(raw.get("category")),
        description=_text(raw.get("description")),
    )
