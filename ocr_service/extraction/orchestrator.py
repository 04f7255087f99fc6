from collections.abc import Sequence
from pathlib import Path

from ocr_service.artifacts.store import ArtifactStore
from ocr_service.config.settings import Settings
from ocr_service.extraction.exceptions import (
    DocumentReadError,
    DocumentTooLargeError,
    InsufficientContentError,
    RenderError,
)
from ocr_service.extraction.models import (
    Accepted,
    ExtractionMethod,
    ExtractionOutcome,
    ExtractionRequest,
    PageImage,
    PageRecognitionOutcome,
    RecognitionFailed,
    RecognizedText,
)
from ocr_service.extraction.pages import PageRecognitionRunner
from ocr_service.extraction.validator import (
    ResultValidator,
    is_page_text_usable,
    is_structural_sufficient,
)
from ocr_service.logging.logger import Log
from ocr_service.ocr.tesseract_adapter import TesseractRecognizer
from ocr_service.pdf.base import BasePageRenderer, BasePdfExtractor
from ocr_service.pdf.exceptions import PdfExtractionError, PdfRenderError
from ocr_service.pdf.factory import PageRendererFactory, PdfExtractorFactory

INSUFFICIENT_CONTENT_DETAIL = "Unable to extract meaningful text from PDF"


def format_page_text(index: int, text: str) -> str:
    return f"--- Page {index} ---\n{text.strip()}"


def aggregate_pages(outcomes: Sequence[PageRecognitionOutcome]) -> str:
    """Join usable page texts in page order, each under its page marker."""
    parts = [
        format_page_text(outcome.index, outcome.text)
        for outcome in sorted(outcomes, key=lambda o: o.index)
        if isinstance(outcome, RecognizedText) and is_page_text_usable(outcome.text)
    ]
    return "\n\n".join(parts)


class ExtractionOrchestrator:
    """Runs the tiered extraction strategy for one request at a time.

    Pipeline: read upload -> structural extraction -> (if insufficient)
    render pages -> recognize pages -> aggregate -> final validation.
    Every temporary artifact is deleted before ``extract`` returns or raises.
    """

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        page_renderer: BasePageRenderer,
        page_runner: PageRecognitionRunner,
        artifact_store: ArtifactStore,
        validator: ResultValidator | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._page_renderer = page_renderer
        self._page_runner = page_runner
        self._artifacts = artifact_store
        self._validator = validator if validator is not None else ResultValidator()

    def extract(self, request: ExtractionRequest) -> ExtractionOutcome:
        """Extract text from the request's document.

        Raises:
            DocumentReadError: if the stored upload cannot be read.
            DocumentTooLargeError: if the stored upload exceeds its size limit.
            RenderError: if recognition was needed but no page could be rendered.
            InsufficientContentError: if the final text fails validation.
        """
        Log.info(
            f"Processing PDF: {request.original_filename} for module: {request.module_id}"
        )
        try:
            content = self._read_document(request)
            structural_text = self._extract_structural(content)
            if structural_text is not None:
                return self._finish(structural_text, ExtractionMethod.STRUCTURAL)

            Log.warning("Structural extraction insufficient, proceeding with OCR")
            outcomes = self._recognize_document(request.document_path)
        finally:
            self._artifacts.delete_path(request.document_path)

        failed_pages = tuple(o.index for o in outcomes if isinstance(o, RecognitionFailed))
        return self._finish(
            aggregate_pages(outcomes),
            ExtractionMethod.RECOGNITION,
            page_count=len(outcomes),
            failed_pages=failed_pages,
        )

    def _read_document(self, request: ExtractionRequest) -> bytes:
        try:
            content = request.document_path.read_bytes()
        except OSError as exc:
            raise DocumentReadError(f"Cannot read uploaded document: {exc}") from exc
        if len(content) > request.size_limit_bytes:
            raise DocumentTooLargeError(
                f"Document is {len(content)} bytes, limit is {request.size_limit_bytes}"
            )
        return content

    def _extract_structural(self, content: bytes) -> str | None:
        """Return the embedded text if it passes the sufficiency policy."""
        try:
            text = self._pdf_extractor.extract(content)
        except PdfExtractionError as exc:
            Log.warning(f"Structural extraction failed: {exc}")
            return None
        if not is_structural_sufficient(text):
            Log.debug(f"Structural extraction returned {len(text.strip())} chars")
            return None
        Log.info(f"Structural extraction successful: {len(text.strip())} characters")
        return text.strip()

    def _recognize_document(self, document_path: Path) -> list[PageRecognitionOutcome]:
        page_dir = self._artifacts.create_page_dir()
        pages: list[PageImage] = []
        try:
            try:
                rendered = self._page_renderer.render(document_path, page_dir)
            except PdfRenderError as exc:
                raise RenderError(str(exc)) from exc
            pages = [PageImage(index=i, path=path) for i, path in enumerate(rendered, start=1)]
            Log.info(f"Converted PDF to {len(pages)} images")
            return self._page_runner.run(pages)
        finally:
            self._artifacts.delete_all(page.path for page in pages)
            self._artifacts.delete_path(page_dir)

    def _finish(
        self,
        text: str,
        method: ExtractionMethod,
        *,
        page_count: int = 0,
        failed_pages: tuple[int, ...] = (),
    ) -> ExtractionOutcome:
        verdict = self._validator.validate(text)
        if not isinstance(verdict, Accepted):
            Log.error(f"Text extraction failed ({method.value}): {verdict.reason}")
            raise InsufficientContentError(INSUFFICIENT_CONTENT_DETAIL)
        return ExtractionOutcome(
            text=verdict.text,
            method=method,
            character_count=len(verdict.text),
            page_count=page_count,
            failed_pages=failed_pages,
        )


def build_orchestrator(settings: Settings) -> ExtractionOrchestrator:
    """Build an ExtractionOrchestrator with the adapters selected in settings."""
    recognizer = TesseractRecognizer(
        language=settings.ocr_language,
        page_segmentation_mode=settings.ocr_page_segmentation_mode,
        timeout_seconds=settings.ocr_page_timeout_seconds,
        tesseract_cmd=settings.tesseract_cmd,
    )
    return ExtractionOrchestrator(
        pdf_extractor=PdfExtractorFactory.create(settings),
        page_renderer=PageRendererFactory.create(settings),
        page_runner=PageRecognitionRunner(recognizer, max_workers=settings.ocr_max_workers),
        artifact_store=ArtifactStore(
            upload_dir=Path(settings.upload_dir),
            page_image_dir=Path(settings.page_image_dir),
        ),
    )
