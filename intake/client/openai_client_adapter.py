from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx
import openai

from intake.client.base import BaseAgentClient
from intake.client.exceptions import AgentError, AgentNetworkError
from intake.client.prompt_loader import load_prompt_bundle
from intake.logging.logger import Log


class OpenAIAgentClient(BaseAgentClient):
    """Generates the intake document with an OpenAI-compatible chat model.

    The reply is shaped like the agent service's reply so it goes through
    the same resolution path.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        temperature: float = 0.2,
        base_url: str | None = None,
        prompt_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._temperature = temperature
        self._prompts = load_prompt_bundle(prompt_path, json_schema_path)

    async def invoke(
        self,
        message: str,
        agent_id: str,
        *,
        assets: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        if assets:
            Log.info(f"Chat model provider ignores {len(assets)} attached asset(s)")
        Log.debug(f"Invoking {self._model} on behalf of agent {agent_id}")
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "intake_document",
                        "strict": False,
                        "schema": self._prompts.json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": self._prompts.system_prompt},
                    {"role": "user", "content": message},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AgentNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AgentNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AgentError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AgentError("AI returned empty response")
        return {
            "success": True,
            "response": {"status": "success", "result": content},
            "raw_response": content,
        }
