from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ocr_service.api.routes import router
from ocr_service.artifacts.store import ArtifactStore
from ocr_service.assistant.chat import StudyAssistant
from ocr_service.assistant.concepts import ConceptExtractor
from ocr_service.assistant.factory import AssistantFactory
from ocr_service.config.settings import Settings
from ocr_service.extraction.orchestrator import ExtractionOrchestrator, build_orchestrator


def create_app(
    settings: Settings,
    *,
    orchestrator: ExtractionOrchestrator | None = None,
    artifact_store: ArtifactStore | None = None,
    concept_extractor: ConceptExtractor | None = None,
    study_assistant: StudyAssistant | None = None,
) -> FastAPI:
    """Build the HTTP application; collaborators default to the configured adapters."""
    app = FastAPI(title=settings.service_name, version=settings.service_version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.orchestrator = orchestrator or build_orchestrator(settings)
    app.state.artifact_store = artifact_store or ArtifactStore(
        upload_dir=Path(settings.upload_dir),
        page_image_dir=Path(settings.page_image_dir),
    )
    app.state.concept_extractor = (
        concept_extractor or AssistantFactory.create_concept_extractor(settings)
    )
    app.state.study_assistant = study_assistant or AssistantFactory.create_study_assistant(
        settings
    )

    app.include_router(router)
    return app
