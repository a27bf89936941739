import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest

from intake.client.base import BaseAssetUploader
from intake.ingestion.models import SelectedFile, UploadResult


class ScriptedUploader(BaseAssetUploader):
    """Uploader whose replies are scripted per file name.

    Records ``start:<name>`` / ``end:<name>`` events so tests can check
    ordering. A file listed in ``gates`` waits for its event before replying.
    """

    def __init__(
        self,
        replies: dict[str, UploadResult | Exception] | None = None,
        gates: dict[str, asyncio.Event] | None = None,
    ) -> None:
        self.replies = replies or {}
        self.gates = gates or {}
        self.events: list[str] = []
        self.uploaded: list[str] = []

    async def upload(self, file: SelectedFile) -> UploadResult:
        self.events.append(f"start:{file.name}")
        gate = self.gates.get(file.name)
        if gate is not None:
            await gate.wait()
        else:
            await asyncio.sleep(0)
        self.uploaded.append(file.name)
        self.events.append(f"end:{file.name}")
        reply = self.replies.get(file.name)
        if isinstance(reply, Exception):
            raise reply
        if reply is None:
            return UploadResult(success=True, asset_ids=[f"asset-{len(self.uploaded)}"])
        return reply


@pytest.fixture()
def make_file(tmp_path: Path) -> Callable[..., SelectedFile]:
    """Write a file under tmp_path and return its SelectedFile handle."""
    counter = {"n": 0}

    def _make(
        name: str,
        content: str | bytes = "hello",
        media_type: str | None = None,
    ) -> SelectedFile:
        counter["n"] += 1
        directory = tmp_path / f"f{counter['n']}"
        directory.mkdir()
        path = directory / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return SelectedFile.from_path(path, media_type=media_type)

    return _make


@pytest.fixture()
def uploader() -> ScriptedUploader:
    return ScriptedUploader()


@pytest.fixture()
def uploader_factory() -> type[ScriptedUploader]:
    return ScriptedUploader
