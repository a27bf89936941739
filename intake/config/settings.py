from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    agent_provider: str = "http"
    agent_id: str = "6996271fb3106c6867a6c6ac"
    agent_base_url: str = "http://localhost:3000"
    agent_invoke_path: str = "/api/agent"
    agent_upload_path: str = "/api/upload"
    agent_api_key: str = ""
    agent_timeout_seconds: int = 120

    upload_provider: str = "http"
    upload_timeout_seconds: int = 60
    max_file_size_mb: int = 10

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60
    openai_temperature: float = 0.2

    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024
