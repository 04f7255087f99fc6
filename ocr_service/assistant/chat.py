from ocr_service.assistant.client_base import BaseAssistantClient
from ocr_service.assistant.exceptions import AssistantNotConfiguredError


class StudyAssistant:
    """Forwards a study question, optionally prefixed by context, to the model."""

    def __init__(
        self,
        *,
        client: BaseAssistantClient | None,
        model: str,
        max_tokens: int = 1000,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens

    def reply(self, message: str, context: str | None = None) -> str:
        if self._client is None:
            raise AssistantNotConfiguredError("Assistant API key not configured")
        prompt = f"{context}\n\n{message}" if context else message
        return self._client.create_message(
            model=self._model,
            max_tokens=self._max_tokens,
            system_prompt="",
            user_prompt=prompt,
        )
