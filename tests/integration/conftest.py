import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from ocr_service.artifacts.store import ArtifactStore
from ocr_service.extraction.models import ExtractionRequest

requires_tesseract = pytest.mark.skipif(
    shutil.which("tesseract") is None, reason="tesseract binary not installed"
)
requires_poppler = pytest.mark.skipif(
    shutil.which("pdftoppm") is None, reason="poppler-utils not installed"
)


@pytest.fixture()
def stage_upload(artifact_store: ArtifactStore) -> Callable[[bytes], ExtractionRequest]:
    """Write PDF bytes through the artifact store and wrap them in a request."""

    def _stage(content: bytes) -> ExtractionRequest:
        path: Path = artifact_store.register_upload(content)
        return ExtractionRequest(
            document_path=path,
            original_filename="lecture.pdf",
            size_limit_bytes=50 * 1024 * 1024,
            module_id="integration",
        )

    return _stage
