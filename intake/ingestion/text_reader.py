import asyncio
import re

from intake.ingestion.models import SelectedFile
from intake.logging.logger import Log

ACCEPTED_FILE_TYPES = ".txt,.md,.doc,.docx,.pdf,.rtf,.csv,.json,.log"

_TEXT_MEDIA_PREFIXES = ("text/", "application/json", "application/csv")
_TEXT_EXTENSIONS = re.compile(r"\.(txt|md|csv|json|log|rtf)$", re.IGNORECASE)


def is_text_like(file: SelectedFile) -> bool:
    """True when the media type or file name marks the file as readable text."""
    return file.media_type.startswith(_TEXT_MEDIA_PREFIXES) or bool(
        _TEXT_EXTENSIONS.search(file.name)
    )


async def read_text_content(file: SelectedFile) -> str | None:
    """Read a text-like file as UTF-8.

    Binary formats (PDF, DOC, ...) are not decoded and return None; their
    content only reaches the agent through the uploaded asset. A read error
    also returns None.
    """
    if not is_text_like(file):
        return None
    try:
        return await asyncio.to_thread(
            file.path.read_text, encoding="utf-8", errors="replace"
        )
    except OSError as exc:
        Log.warning(f"Could not read {file.name}: {exc}")
        return None
