"""Example agent and asset store adapters.

Use this module as a reference when implementing new provider adapters.
Implement BaseAgentClient / BaseAssetUploader and register the provider in
the factories.
"""

import json
from collections.abc import Sequence
from typing import Any, ClassVar

from intake.client.base import BaseAgentClient, BaseAssetUploader
from intake.client.example_data import SAMPLE_DOCUMENT
from intake.ingestion.models import SelectedFile, UploadResult


class ExampleAgentClient(BaseAgentClient):
    """Example adapter that returns the sample intake document.

    No network calls. The document is JSON-encoded inside ``response.result``
    the way the agent service usually replies.
    """

    SESSION_ID: ClassVar[str] = "example-session"

    async def invoke(
        self,
        message: str,
        agent_id: str,
        *,
        assets: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        _ = message, agent_id, assets
        return {
            "success": True,
            "session_id": self.SESSION_ID,
            "response": {"status": "success", "result": json.dumps(SAMPLE_DOCUMENT)},
        }


class ExampleAssetUploader(BaseAssetUploader):
    """Example adapter that accepts every file and numbers the assets."""

    def __init__(self) -> None:
        self._count = 0

    async def upload(self, file: SelectedFile) -> UploadResult:
        self._count += 1
        return UploadResult(success=True, asset_ids=[f"example-asset-{self._count}"])
