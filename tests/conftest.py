import io
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from ocr_service.artifacts.store import ArtifactStore
from ocr_service.extraction.orchestrator import ExtractionOrchestrator
from ocr_service.extraction.pages import PageRecognitionRunner
from ocr_service.ocr.base import BasePageRecognizer
from ocr_service.pdf.base import BasePageRenderer, BasePdfExtractor
from tests.fakes import FakePageRecognizer, FakePageRenderer

RICH_LINES = [
    "Structural extraction reads the text layer embedded in the document.",
    "It is fast and exact, so only scanned pages are sent to OCR.",
    "Each page image is rendered at three hundred dots per inch.",
    "Temporary files are removed once the request has been answered.",
]


def build_pdf(pages: Sequence[Sequence[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 16
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return build_pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return build_pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return build_pdf([[]])


@pytest.fixture()
def rich_text_pdf_bytes() -> bytes:
    """Generate a PDF whose text layer is well above the structural threshold."""
    return build_pdf([RICH_LINES])


@pytest.fixture()
def artifact_store(tmp_path: Path) -> ArtifactStore:
    return ArtifactStore(
        upload_dir=tmp_path / "uploads",
        page_image_dir=tmp_path / "pages",
    )


@pytest.fixture()
def make_orchestrator(
    artifact_store: ArtifactStore,
) -> Callable[..., ExtractionOrchestrator]:
    def _make(
        *,
        extractor: BasePdfExtractor,
        renderer: BasePageRenderer | None = None,
        recognizer: BasePageRecognizer | None = None,
        max_workers: int = 1,
    ) -> ExtractionOrchestrator:
        return ExtractionOrchestrator(
            pdf_extractor=extractor,
            page_renderer=renderer or FakePageRenderer(page_count=0),
            page_runner=PageRecognitionRunner(
                recognizer or FakePageRecognizer({}), max_workers=max_workers
            ),
            artifact_store=artifact_store,
        )

    return _make
