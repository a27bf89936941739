from intake.resolution.models import DOCUMENT_SECTIONS, CanonicalDocument, OpenQuestion
from intake.resolution.resolver import ResponseResolver

__all__ = ["CanonicalDocument", "DOCUMENT_SECTIONS", "OpenQuestion", "ResponseResolver"]
