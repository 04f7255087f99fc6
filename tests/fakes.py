"""In-memory collaborators for exercising the extraction pipeline."""

from collections.abc import Mapping
from pathlib import Path

from ocr_service.ocr.base import BasePageRecognizer
from ocr_service.pdf.base import BasePageRenderer, BasePdfExtractor
from ocr_service.pdf.exceptions import PdfRenderError


class FakePdfExtractor(BasePdfExtractor):
    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls = 0

    def extract(self, pdf_bytes: bytes) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.text


class FakePageRenderer(BasePageRenderer):
    """Writes ``page_count`` placeholder images, optionally failing midway."""

    def __init__(self, page_count: int = 1, fail_after: int | None = None) -> None:
        self.page_count = page_count
        self.fail_after = fail_after
        self.calls = 0

    def render(self, document_path: Path, output_dir: Path) -> list[Path]:
        self.calls += 1
        paths: list[Path] = []
        for number in range(1, self.page_count + 1):
            if self.fail_after is not None and number > self.fail_after:
                raise PdfRenderError(f"cannot rasterize page {number}")
            path = output_dir / f"page-{number}.png"
            path.write_bytes(b"\x89PNG fake")
            paths.append(path)
        return paths


class FakePageRecognizer(BasePageRecognizer):
    """Returns per-page text keyed by 1-based page number; exceptions are raised."""

    def __init__(self, pages: Mapping[int, str | Exception]) -> None:
        self.pages = dict(pages)
        self.seen: list[Path] = []

    def recognize(self, image_path: Path) -> str:
        self.seen.append(image_path)
        number = int(image_path.stem.rsplit("-", 1)[-1])
        result = self.pages.get(number, "")
        if isinstance(result, Exception):
            raise result
        return result


def residual_files(root: Path) -> list[Path]:
    """All regular files left under ``root``."""
    return [path for path in root.rglob("*") if path.is_file()]
