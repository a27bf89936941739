import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from intake.client.exceptions import AgentConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"
SYSTEM_PROMPT_FILE = "intake_system_prompt.txt"
DOCUMENT_SCHEMA_FILE = "intake_document_schema.json"
SCHEMA_PLACEHOLDER = "{json_schema}"


@dataclass(frozen=True)
class PromptBundle:
    """System prompt with the document schema already substituted in."""

    system_prompt: str
    json_schema: dict[str, Any]


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AgentConfigurationError(f"Failed to load {what}: {exc}") from exc


def load_system_prompt(path: Path | None = None) -> str:
    """Load the raw system prompt template (with the schema placeholder).

    Raises:
        AgentConfigurationError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / SYSTEM_PROMPT_FILE, "system prompt")


def load_json_schema(path: Path | None = None) -> str:
    return _read(path or _DEFAULT_PROMPT_DIR / DOCUMENT_SCHEMA_FILE, "JSON schema")


def load_prompt_bundle(
    prompt_path: Path | None = None,
    schema_path: Path | None = None,
) -> PromptBundle:
    """Load the prompt and schema and render the schema into the prompt.

    Raises:
        AgentConfigurationError: if a file cannot be read or the schema is
            not a JSON object.
    """
    schema_text = load_json_schema(schema_path)
    try:
        schema = json.loads(schema_text)
    except ValueError as exc:
        raise AgentConfigurationError(f"Invalid JSON schema: {exc}") from exc
    if not isinstance(schema, dict):
        raise AgentConfigurationError("Invalid JSON schema: top level must be an object")
    prompt = load_system_prompt(prompt_path).replace(SCHEMA_PLACEHOLDER, schema_text)
    return PromptBundle(system_prompt=prompt, json_schema=schema)
