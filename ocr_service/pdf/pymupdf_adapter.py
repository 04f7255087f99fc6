from pathlib import Path

import pymupdf

from ocr_service.pdf.base import BasePageRenderer, BasePdfExtractor
from ocr_service.pdf.exceptions import PdfExtractionError, PdfRenderError


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads the embedded text layer with PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return "\n".join(pages).strip()


class PyMuPdfRenderer(BasePageRenderer):
    """Rasterizes pages with PyMuPDF, without an external poppler install.

    When a target canvas is given, each page is scaled to exactly
    ``width`` x ``height`` pixels; otherwise it is rendered at ``dpi``.
    """

    def __init__(self, dpi: int = 300, width: int = 0, height: int = 0) -> None:
        self._dpi = dpi
        self._width = width
        self._height = height

    def render(self, document_path: Path, output_dir: Path) -> list[Path]:
        paths: list[Path] = []
        try:
            with pymupdf.open(str(document_path)) as doc:  # type: ignore[no-untyped-call]
                for number, page in enumerate(doc, start=1):
                    pixmap = self._rasterize(page)
                    target = output_dir / f"page-{number}.png"
                    pixmap.save(str(target))
                    paths.append(target)
        except Exception as exc:
            raise PdfRenderError(f"pymupdf rendering failed: {exc}") from exc
        return paths

    def _rasterize(self, page: "pymupdf.Page") -> "pymupdf.Pixmap":
        if self._width and self._height:
            matrix = pymupdf.Matrix(
                self._width / page.rect.width,
                self._height / page.rect.height,
            )
            return page.get_pixmap(matrix=matrix)
        return page.get_pixmap(dpi=self._dpi)
