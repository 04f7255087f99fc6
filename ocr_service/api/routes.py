from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ocr_service.api.dependencies import (
    get_artifact_store,
    get_concept_extractor,
    get_orchestrator,
    get_settings,
    get_study_assistant,
)
from ocr_service.api.schemas import ChatRequest, ConceptsRequest
from ocr_service.api.uploads import read_upload
from ocr_service.artifacts.store import ArtifactStore
from ocr_service.assistant.chat import StudyAssistant
from ocr_service.assistant.concepts import ConceptExtractor
from ocr_service.assistant.exceptions import (
    AssistantError,
    AssistantNetworkError,
    AssistantNotConfiguredError,
    AssistantResponseError,
)
from ocr_service.config.settings import Settings
from ocr_service.extraction.exceptions import DocumentTooLargeError, InsufficientContentError
from ocr_service.extraction.models import ExtractionRequest
from ocr_service.extraction.orchestrator import ExtractionOrchestrator
from ocr_service.logging.logger import Log

router = APIRouter()


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    content: dict[str, str] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@router.get("/")
def service_info(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, object]:
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "endpoints": {
            "GET /": "Service information",
            "GET /health": "Health check",
            "POST /ocr": "Process PDF/image for OCR",
            "POST /extract-concepts": "Extract concepts from text using AI",
            "POST /chat": "AI chat for study assistance",
        },
    }


@router.get("/health")
def health(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, str]:
    return {"status": "healthy", "service": settings.service_name}


@router.post("/ocr")
async def ocr(
    settings: Annotated[Settings, Depends(get_settings)],
    orchestrator: Annotated[ExtractionOrchestrator, Depends(get_orchestrator)],
    artifact_store: Annotated[ArtifactStore, Depends(get_artifact_store)],
    pdf: Annotated[UploadFile | None, File()] = None,
    module_id: Annotated[str | None, Form(alias="moduleId")] = None,
) -> JSONResponse:
    if pdf is None:
        return _error(400, "No PDF file uploaded")

    filename = pdf.filename or "upload.pdf"
    document_path: Path | None = None
    try:
        content = await read_upload(pdf, settings.max_upload_bytes)
        document_path = await run_in_threadpool(artifact_store.register_upload, content)
        extraction_request = ExtractionRequest(
            document_path=document_path,
            original_filename=filename,
            size_limit_bytes=settings.max_upload_bytes,
            module_id=module_id or "unknown",
        )
        outcome = await run_in_threadpool(orchestrator.extract, extraction_request)
    except DocumentTooLargeError as exc:
        return _error(413, "PDF file too large", str(exc))
    except InsufficientContentError as exc:
        return _error(500, "Text extraction failed", str(exc))
    except Exception as exc:
        Log.exception(f"Error processing PDF {filename}: {exc}")
        return _error(500, "PDF processing failed", str(exc))
    finally:
        if document_path is not None:
            artifact_store.delete_path(document_path)

    return JSONResponse(
        content={
            "success": True,
            "text": outcome.text,
            "filename": filename,
            "moduleId": extraction_request.module_id,
            "textLength": outcome.character_count,
            "method": outcome.method.value,
        }
    )


@router.post("/extract-concepts")
async def extract_concepts(
    body: ConceptsRequest,
    extractor: Annotated[ConceptExtractor, Depends(get_concept_extractor)],
) -> JSONResponse:
    if not body.text or not body.fileName:
        return _error(400, "Text and fileName are required")
    try:
        concepts = await run_in_threadpool(extractor.extract, body.text, body.fileName)
    except AssistantNotConfiguredError as exc:
        return _error(500, str(exc))
    except AssistantNetworkError as exc:
        Log.error(f"Concept extraction provider failure: {exc}")
        return _error(502, "AI provider request failed", str(exc))
    except AssistantResponseError as exc:
        Log.error(f"Failed to parse AI response: {exc}")
        return _error(500, "Failed to parse AI response", str(exc))
    except AssistantError as exc:
        Log.error(f"Error extracting concepts: {exc}")
        return _error(500, "Concept extraction failed", str(exc))

    return JSONResponse(
        content={
            "success": True,
            "concepts": concepts,
            "totalConcepts": len(concepts),
        }
    )


@router.post("/chat")
async def chat(
    body: ChatRequest,
    assistant: Annotated[StudyAssistant, Depends(get_study_assistant)],
) -> JSONResponse:
    if not body.message:
        return _error(400, "Message is required")
    try:
        answer = await run_in_threadpool(assistant.reply, body.message, body.context)
    except AssistantNotConfiguredError as exc:
        return _error(500, str(exc))
    except AssistantNetworkError as exc:
        Log.error(f"Chat provider failure: {exc}")
        return _error(502, "AI provider request failed", str(exc))
    except AssistantError as exc:
        Log.error(f"Error in chat: {exc}")
        return _error(500, "Chat failed", str(exc))

    return JSONResponse(content={"success": True, "response": answer})
