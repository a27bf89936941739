from intake.client.base import BaseAgentClient, BaseAssetUploader
from intake.client.example_client_adapter import ExampleAgentClient, ExampleAssetUploader
from intake.client.http_agent_adapter import HttpAgentClient
from intake.client.http_upload_adapter import HttpAssetUploader
from intake.client.openai_client_adapter import OpenAIAgentClient
from intake.config.settings import Settings


class AgentClientFactory:
    """Creates the configured agent adapter."""

    PROVIDERS = ("http", "openai", "openai_compatible", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseAgentClient:
        provider = settings.agent_provider.lower()
        if provider == "example":
            return ExampleAgentClient()
        if provider == "http":
            return HttpAgentClient(
                base_url=settings.agent_base_url,
                invoke_path=settings.agent_invoke_path,
                timeout_seconds=settings.agent_timeout_seconds,
                api_key=settings.agent_api_key,
            )
        if provider == "openai":
            return OpenAIAgentClient(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
                temperature=settings.openai_temperature,
            )
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for agent_provider=openai_compatible"
                )
            return OpenAIAgentClient(
                api_key=settings.openai_compatible_api_key,
                model=settings.openai_compatible_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
                temperature=settings.openai_temperature,
                base_url=url,
            )
        raise ValueError(
            f"Unknown agent provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )


class AssetUploaderFactory:
    """Creates the configured asset store adapter."""

    PROVIDERS = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseAssetUploader:
        provider = settings.upload_provider.lower()
        if provider == "example":
            return ExampleAssetUploader()
        if provider == "http":
            return HttpAssetUploader(
                base_url=settings.agent_base_url,
                upload_path=settings.agent_upload_path,
                timeout_seconds=settings.upload_timeout_seconds,
                api_key=settings.agent_api_key,
            )
        raise ValueError(
            f"Unknown upload provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
