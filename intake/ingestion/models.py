import mimetypes
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

DEFAULT_UPLOAD_ERROR = "Upload failed"


class UploadStatus(str, Enum):
    UPLOADING = "uploading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class SelectedFile:
    """A file chosen by the user, before any processing."""

    path: Path
    name: str
    size_bytes: int
    media_type: str = ""

    @classmethod
    def from_path(cls, path: Path, media_type: str | None = None) -> "SelectedFile":
        if media_type is None:
            media_type = mimetypes.guess_type(path.name)[0] or ""
        return cls(
            path=path,
            name=path.name,
            size_bytes=path.stat().st_size,
            media_type=media_type,
        )


@dataclass(frozen=True, slots=True)
class UploadResult:
    """Reply of the remote asset store for one file."""

    success: bool
    asset_ids: list[str] = field(default_factory=list)
    error: str | None = None


def format_file_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


@dataclass(frozen=True, slots=True)
class UploadedFileRecord:
    """One selected file through extraction and upload.

    ``remote_asset_id`` is set only in READY and ``error_detail`` only in
    FAILED. ``extracted_text`` is independent of the upload outcome.
    """

    record_id: str
    source: SelectedFile
    display_name: str
    size_label: str
    status: UploadStatus = UploadStatus.UPLOADING
    extracted_text: str | None = None
    remote_asset_id: str | None = None
    error_detail: str | None = None

    def __post_init__(self) -> None:
        if (self.status is UploadStatus.READY) != (self.remote_asset_id is not None):
            raise ValueError("remote_asset_id must be set exactly when status is READY")
        if (self.status is UploadStatus.FAILED) != (self.error_detail is not None):
            raise ValueError("error_detail must be set exactly when status is FAILED")

    @classmethod
    def create(cls, source: SelectedFile) -> "UploadedFileRecord":
        return cls(
            record_id=uuid.uuid4().hex,
            source=source,
            display_name=source.name,
            size_label=format_file_size(source.size_bytes),
        )

    @property
    def is_uploading(self) -> bool:
        return self.status is UploadStatus.UPLOADING

    @property
    def status_label(self) -> str:
        if self.status is UploadStatus.UPLOADING:
            return "Uploading..."
        if self.status is UploadStatus.FAILED:
            return self.error_detail or DEFAULT_UPLOAD_ERROR
        return "Uploaded"

    def mark_ready(self, asset_id: str, extracted_text: str | None) -> "UploadedFileRecord":
        return replace(
            self,
            status=UploadStatus.READY,
            remote_asset_id=asset_id,
            extracted_text=extracted_text,
            error_detail=None,
        )

    def mark_failed(self, detail: str, extracted_text: str | None) -> "UploadedFileRecord":
        return replace(
            self,
            status=UploadStatus.FAILED,
            remote_asset_id=None,
            extracted_text=extracted_text,
            error_detail=detail,
        )
