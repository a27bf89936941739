import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from intake.client.exceptions import AgentError, AgentNetworkError
from intake.client.openai_client_adapter import OpenAIAgentClient


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _mock_client(response: MagicMock | None = None) -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(return_value=response)
    return mock_client


def _adapter(mock_client: MagicMock, **kwargs: object) -> OpenAIAgentClient:
    with patch(
        "intake.client.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ):
        return OpenAIAgentClient(api_key="k", model="m", timeout_seconds=30, **kwargs)


class TestOpenAIAgentClient:
    @pytest.mark.asyncio
    async def test_wraps_content_like_agent_reply(self) -> None:
        mock_client = _mock_client(_make_mock_response('{"document_title": "T"}'))
        reply = await _adapter(mock_client).invoke("material", "agent-1")
        assert reply == {
            "success": True,
            "response": {"status": "success", "result": '{"document_title": "T"}'},
            "raw_response": '{"document_title": "T"}',
        }

    @pytest.mark.asyncio
    async def test_sends_prompt_and_schema(self) -> None:
        mock_client = _mock_client(_make_mock_response("{}"))
        await _adapter(mock_client, temperature=0.5).invoke("material", "agent-1")

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["temperature"] == 0.5
        assert kwargs["response_format"]["type"] == "json_schema"
        schema = kwargs["response_format"]["json_schema"]["schema"]
        assert "document_title" in schema["properties"]
        system, user = kwargs["messages"]
        assert system["role"] == "system"
        assert "{json_schema}" not in system["content"]
        assert "needs_clarification" in system["content"]
        assert user == {"role": "user", "content": "material"}

    @pytest.mark.asyncio
    async def test_custom_prompt_files(self, tmp_path: Path) -> None:
        prompt = tmp_path / "prompt.txt"
        prompt.write_text("Schema: {json_schema}")
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps({"type": "object"}))
        mock_client = _mock_client(_make_mock_response("{}"))

        adapter = _adapter(mock_client, prompt_path=prompt, json_schema_path=schema)
        await adapter.invoke("x", "a")

        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[0]["content"] == 'Schema: {"type": "object"}'

    @pytest.mark.asyncio
    async def test_raises_error_for_empty_content(self) -> None:
        mock_client = _mock_client(_make_mock_response(None))
        with pytest.raises(AgentError, match="empty response"):
            await _adapter(mock_client).invoke("x", "a")

    @pytest.mark.asyncio
    async def test_raises_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = _mock_client(response)
        with pytest.raises(AgentError, match="no choices"):
            await _adapter(mock_client).invoke("x", "a")

    @pytest.mark.asyncio
    async def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = _mock_client()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(AgentNetworkError, match="network error"):
            await _adapter(mock_client).invoke("x", "a")

    @pytest.mark.asyncio
    async def test_raises_network_error_on_timeout(self) -> None:
        mock_client = _mock_client()
        mock_client.chat.completions.create.side_effect = httpx.ReadTimeout("slow")
        with pytest.raises(AgentNetworkError, match="network error"):
            await _adapter(mock_client).invoke("x", "a")

    @pytest.mark.asyncio
    async def test_raises_network_error_on_api_error(self) -> None:
        mock_client = _mock_client()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            "bad request", request=MagicMock(), body=None
        )
        with pytest.raises(AgentNetworkError, match="API error"):
            await _adapter(mock_client).invoke("x", "a")

    @pytest.mark.asyncio
    async def test_assets_are_ignored(self) -> None:
        mock_client = _mock_client(_make_mock_response("{}"))
        reply = await _adapter(mock_client).invoke("x", "a", assets=["asset-1"])
        assert reply["success"] is True
        assert "assets" not in mock_client.chat.completions.create.call_args.kwargs

    def test_passes_base_url_to_client(self) -> None:
        with patch("intake.client.openai_client_adapter.openai.AsyncOpenAI") as mock_cls:
            OpenAIAgentClient(
                api_key="k",
                model="m",
                timeout_seconds=12,
                base_url="http://llm.local/v1",
            )
        mock_cls.assert_called_once_with(
            api_key="k", timeout=12, base_url="http://llm.local/v1"
        )
