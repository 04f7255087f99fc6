from abc import ABC, abstractmethod


class BaseAssistantClient(ABC):
    """Contract for provider-specific language-model clients."""

    @abstractmethod
    def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return provider response as plain text."""
