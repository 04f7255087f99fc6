from fastapi import Request

from ocr_service.artifacts.store import ArtifactStore
from ocr_service.assistant.chat import StudyAssistant
from ocr_service.assistant.concepts import ConceptExtractor
from ocr_service.config.settings import Settings
from ocr_service.extraction.orchestrator import ExtractionOrchestrator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_orchestrator(request: Request) -> ExtractionOrchestrator:
    return request.app.state.orchestrator


def get_artifact_store(request: Request) -> ArtifactStore:
    return request.app.state.artifact_store


def get_concept_extractor(request: Request) -> ConceptExtractor:
    return request.app.state.concept_extractor


def get_study_assistant(request: Request) -> StudyAssistant:
    return request.app.state.study_assistant
