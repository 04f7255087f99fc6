"""AI-powered study concept extraction."""

import json
import re
from pathlib import Path
from typing import Any

from ocr_service.assistant.client_base import BaseAssistantClient
from ocr_service.assistant.exceptions import AssistantNotConfiguredError, AssistantResponseError
from ocr_service.assistant.prompt_loader import load_prompt_template
from ocr_service.logging.logger import Log

_FENCED_JSON = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)
_BARE_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class ConceptExtractor:
    """Asks a language model for the study concepts contained in a text.

    Concepts are returned exactly as the model wrote them; only the envelope
    (a JSON object with a ``concepts`` list) is checked.
    """

    def __init__(
        self,
        *,
        client: BaseAssistantClient | None,
        model: str,
        max_tokens: int = 4000,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._prompt_template = load_prompt_template(prompt_template_path)

    def extract(self, text: str, file_name: str) -> list[Any]:
        if self._client is None:
            raise AssistantNotConfiguredError("Assistant API key not configured")
        prompt = self._prompt_template.format(file_name=file_name, text=text)
        raw_response = self._client.create_message(
            model=self._model,
            max_tokens=self._max_tokens,
            system_prompt="",
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        concepts = self._parse_concepts(raw_response)
        Log.info(f"Concept extraction complete: {len(concepts)} concepts from {file_name}")
        return concepts

    @staticmethod
    def _parse_concepts(raw: str) -> list[Any]:
        cleaned = raw.strip()
        fenced = _FENCED_JSON.search(cleaned)
        if fenced:
            cleaned = fenced.group(1)
        else:
            bare = _BARE_OBJECT.search(cleaned)
            if bare:
                cleaned = bare.group(0)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AssistantResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AssistantResponseError("JSON response must be an object")
        concepts = parsed.get("concepts") or []
        if not isinstance(concepts, list):
            raise AssistantResponseError("'concepts' must be a list")
        return concepts
