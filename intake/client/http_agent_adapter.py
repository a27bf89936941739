from collections.abc import Sequence
from typing import Any

import httpx

from intake.client.base import BaseAgentClient
from intake.client.exceptions import AgentNetworkError


class HttpAgentClient(BaseAgentClient):
    """Invokes the agent through the JSON endpoint of the intake web service."""

    def __init__(
        self,
        *,
        base_url: str,
        invoke_path: str,
        timeout_seconds: int,
        api_key: str = "",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = base_url.rstrip("/") + invoke_path
        self._timeout = timeout_seconds
        self._headers = {"x-api-key": api_key} if api_key else {}
        self._client = client

    async def invoke(
        self,
        message: str,
        agent_id: str,
        *,
        assets: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": message, "agent_id": agent_id}
        if assets:
            payload["assets"] = list(assets)

        close_client = False
        client = self._client
        if client is None:
            client = httpx.AsyncClient(timeout=self._timeout)
            close_client = True
        try:
            response = await client.post(self._url, json=payload, headers=self._headers)
        except httpx.TransportError as exc:
            raise AgentNetworkError(f"Agent network error: {exc}") from exc
        finally:
            if close_client:
                await client.aclose()

        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            return body
        if response.is_error:
            return {
                "success": False,
                "error": f"Agent request failed with status {response.status_code}",
            }
        return {"success": False, "error": "Agent returned a non-object response"}
