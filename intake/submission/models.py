from dataclasses import dataclass, field
from enum import Enum

from intake.ingestion.collection import FileCollection
from intake.resolution.models import CanonicalDocument

PARSE_FAILURE_MESSAGE = "Failed to parse the agent response. The response format was unexpected."
INVOCATION_FAILURE_MESSAGE = "Failed to generate the intake document. Please try again."


class InputMode(str, Enum):
    PASTE = "paste"
    UPLOAD = "upload"


@dataclass
class ChannelInput:
    """Pasted text and uploaded files of one input channel."""

    files: FileCollection
    mode: InputMode = InputMode.UPLOAD
    pasted_text: str = ""

    def combined_text(self) -> str:
        """Pasted text (in paste mode) followed by the extracted text of each file."""
        pasted = self.pasted_text.strip() if self.mode is InputMode.PASTE else ""
        file_texts = "\n\n".join(
            f"--- File: {record.display_name} ---\n{record.extracted_text}"
            for record in self.files
            if record.extracted_text
        )
        return "\n\n".join(part for part in (pasted, file_texts) if part)

    def file_names(self) -> list[str]:
        return [record.display_name for record in self.files]


@dataclass(frozen=True)
class SubmissionRequest:
    message: str
    asset_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of one generate attempt."""

    document: CanonicalDocument | None = None
    error: str | None = None
    parse_failed: bool = False
    session_id: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.document is not None
