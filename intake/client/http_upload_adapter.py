import asyncio

import httpx

from intake.client.base import BaseAssetUploader
from intake.client.exceptions import AssetUploadError
from intake.ingestion.models import SelectedFile, UploadResult


class HttpAssetUploader(BaseAssetUploader):
    """Uploads files as multipart form data to the intake web service."""

    def __init__(
        self,
        *,
        base_url: str,
        upload_path: str,
        timeout_seconds: int,
        api_key: str = "",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = base_url.rstrip("/") + upload_path
        self._timeout = timeout_seconds
        self._headers = {"x-api-key": api_key} if api_key else {}
        self._client = client

    async def upload(self, file: SelectedFile) -> UploadResult:
        try:
            content = await asyncio.to_thread(file.path.read_bytes)
        except OSError as exc:
            raise AssetUploadError(f"Cannot read {file.name}: {exc}") from exc

        files = {"files": (file.name, content, file.media_type or "application/octet-stream")}
        close_client = False
        client = self._client
        if client is None:
            client = httpx.AsyncClient(timeout=self._timeout)
            close_client = True
        try:
            response = await client.post(self._url, files=files, headers=self._headers)
        except httpx.TransportError as exc:
            raise AssetUploadError(f"Asset store network error: {exc}") from exc
        finally:
            if close_client:
                await client.aclose()

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            return UploadResult(
                success=False,
                error=f"Upload failed with status {response.status_code}",
            )
        asset_ids = body.get("asset_ids")
        return UploadResult(
            success=bool(body.get("success")) and not response.is_error,
            asset_ids=[str(a) for a in asset_ids] if isinstance(asset_ids, list) else [],
            error=body.get("error") if isinstance(body.get("error"), str) else None,
        )
