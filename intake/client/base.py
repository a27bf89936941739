from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from intake.ingestion.models import SelectedFile, UploadResult


class BaseAgentClient(ABC):
    """Contract for document-generation agent adapters."""

    @abstractmethod
    async def invoke(
        self,
        message: str,
        agent_id: str,
        *,
        assets: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Send the assembled message to the agent.

        Args:
            message: The full request text.
            agent_id: Identifier of the agent to run.
            assets: Remote asset ids to attach, if any.

        Returns:
            The raw reply: ``success``, and optionally ``session_id``,
            ``response``, ``error`` and ``raw_response``.

        Raises:
            AgentError: when the agent cannot be reached.
        """


class BaseAssetUploader(ABC):
    """Contract for remote asset store adapters."""

    @abstractmethod
    async def upload(self, file: SelectedFile) -> UploadResult:
        """Register one file with the asset store.

        Raises:
            AssetUploadError: when the store cannot be reached.
        """
