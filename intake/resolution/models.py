from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OpenQuestion:
    """An item the agent could not settle from the material."""

    priority: str | None = None
    category: str | None = None
    description: str | None = None

    @property
    def display_priority(self) -> str:
        return self.priority or "Unknown"

    @property
    def display_category(self) -> str:
        return self.category or "General"

    @property
    def display_description(self) -> str:
        return self.description or ""


@dataclass(frozen=True)
class CanonicalDocument:
    """The project intake document, every field optional."""

    title: str | None = None
    generated_at: str | None = None
    data_sources: list[str] = field(default_factory=list)
    executive_summary: str | None = None
    problem_statement: str | None = None
    goals: str | None = None
    success_criteria: str | None = None
    stakeholder_map: str | None = None
    scope: str | None = None
    technical_requirements: str | None = None
    timeline: str | None = None
    resource_needs: str | None = None
    open_questions: list[OpenQuestion] = field(default_factory=list)
    processing_status: str | None = None
    raw: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class DocumentSection:
    attribute: str
    title: str

    def content(self, document: CanonicalDocument) -> str | None:
        value: str | None = getattr(document, self.attribute)
        return value


DOCUMENT_SECTIONS: tuple[DocumentSection, ...] = (
    DocumentSection("problem_statement", "Problem Statement"),
    DocumentSection("goals", "Project Goals"),
    DocumentSection("success_criteria", "Success Criteria"),
    DocumentSection("stakeholder_map", "Stakeholder Map"),
    DocumentSection("scope", "Project Scope"),
    DocumentSection("technical_requirements", "Technical Requirements"),
    DocumentSection("timeline", "Timeline & Milestones"),
    DocumentSection("resource_needs", "Resource Needs"),
)
