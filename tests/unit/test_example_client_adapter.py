import json

from ocr_service.assistant.example_client_adapter import ExampleClientAdapter


def _ask(prompt: str) -> str:
    return ExampleClientAdapter().create_message(
        model="example", max_tokens=10, system_prompt="", user_prompt=prompt
    )


class TestExampleClientAdapter:
    def test_concept_prompt_gets_concepts_document(self) -> None:
        payload = json.loads(_ask('Return {"concepts": []}'))
        assert payload["concepts"][0]["id"] == "concept_1"

    def test_other_prompts_are_echoed(self) -> None:
        assert _ask("What is OCR?") == "Echo: What is OCR?"
