class AssistantError(Exception):
    """Raised when an assistant request fails."""


class AssistantNotConfiguredError(AssistantError):
    """Raised when no provider credential is configured."""


class AssistantNetworkError(AssistantError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AssistantResponseError(AssistantError):
    """Raised when the provider answer cannot be interpreted."""
