from ocr_service.assistant.chat import StudyAssistant
from ocr_service.assistant.concepts import ConceptExtractor
from ocr_service.assistant.factory import AssistantFactory

__all__ = ["AssistantFactory", "ConceptExtractor", "StudyAssistant"]
