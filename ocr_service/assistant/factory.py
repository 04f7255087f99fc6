from typing import ClassVar

from ocr_service.assistant.chat import StudyAssistant
from ocr_service.assistant.client_base import BaseAssistantClient
from ocr_service.assistant.concepts import ConceptExtractor
from ocr_service.assistant.example_client_adapter import ExampleClientAdapter
from ocr_service.assistant.openai_client_adapter import OpenAIClientAdapter
from ocr_service.config.settings import Settings


class AssistantFactory:
    """Creates assistant services wired to the configured provider.

    A provider without an API key yields services whose calls raise
    AssistantNotConfiguredError, so the HTTP layer can still start.
    """

    PROVIDER_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "anthropic": "https://api.anthropic.com/v1/",
        "openai": None,
    }

    @classmethod
    def create_concept_extractor(cls, settings: Settings) -> ConceptExtractor:
        return ConceptExtractor(
            client=cls.create_client(settings),
            model=cls._resolve_model_name(settings),
            max_tokens=settings.assistant_concepts_max_tokens,
        )

    @classmethod
    def create_study_assistant(cls, settings: Settings) -> StudyAssistant:
        return StudyAssistant(
            client=cls.create_client(settings),
            model=cls._resolve_model_name(settings),
            max_tokens=settings.assistant_chat_max_tokens,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseAssistantClient | None:
        provider = settings.assistant_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            return None
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.assistant_timeout_seconds,
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai_compatible":
            url = settings.assistant_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "assistant_openai_compatible_base_url is required for "
                    "assistant_provider=openai_compatible"
                )
            return url
        if provider in cls.PROVIDER_BASE_URLS:
            return cls.PROVIDER_BASE_URLS[provider]
        supported = ["example", "openai_compatible", *sorted(cls.PROVIDER_BASE_URLS)]
        raise ValueError(f"Unknown assistant provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "anthropic": settings.assistant_anthropic_api_key,
            "openai": settings.assistant_openai_api_key,
            "openai_compatible": settings.assistant_openai_compatible_api_key,
        }
        return key_map.get(provider, "")

    @classmethod
    def _resolve_model_name(cls, settings: Settings) -> str:
        key_map = {
            "anthropic": settings.assistant_anthropic_model_name,
            "openai": settings.assistant_openai_model_name,
            "openai_compatible": settings.assistant_openai_compatible_model_name,
        }
        return key_map.get(settings.assistant_provider.lower(), "example")
