import httpx
import openai

from ocr_service.assistant.client_base import BaseAssistantClient
from ocr_service.assistant.exceptions import AssistantError, AssistantNetworkError


class OpenAIClientAdapter(BaseAssistantClient):
    """Assistant client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                messages=messages,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AssistantNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AssistantNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AssistantError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AssistantError("AI returned empty response")
        return content
