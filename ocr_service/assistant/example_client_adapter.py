"""Offline assistant client for local development and tests."""

import json
from typing import ClassVar

from ocr_service.assistant.client_base import BaseAssistantClient


class ExampleClientAdapter(BaseAssistantClient):
    """Returns canned answers without any network call.

    Prompts asking for concepts get a one-concept JSON document; anything
    else is echoed back.
    """

    CONCEPTS_RESPONSE: ClassVar[dict[str, object]] = {
        "concepts": [
            {
                "id": "concept_1",
                "title": "Example concept",
                "description": "Placeholder concept produced without a language model.",
                "pageNumber": 1,
                "importance": "low",
                "examRelevance": 1,
                "relatedTerms": [],
            }
        ]
    }

    def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, max_tokens, system_prompt
        if '"concepts"' in user_prompt:
            return json.dumps(self.CONCEPTS_RESPONSE)
        return f"Echo: {user_prompt}"
