class AgentError(Exception):
    """Raised when the document-generation agent cannot be invoked."""


class AgentNetworkError(AgentError):
    """Raised when the agent call fails due to network/infrastructure issues."""


class AgentConfigurationError(AgentError):
    """Raised when a bundled prompt or schema cannot be loaded."""


class AssetUploadError(Exception):
    """Raised when a file cannot be sent to the asset store."""
