from pathlib import Path

from pdf2image import convert_from_path

from ocr_service.pdf.base import BasePageRenderer
from ocr_service.pdf.exceptions import PdfRenderError


class Pdf2ImageRenderer(BasePageRenderer):
    """Rasterizes pages through poppler via pdf2image.

    Images are written straight to ``output_dir`` as PNG files so that only
    paths, never decoded bitmaps, are held in memory.
    """

    def __init__(self, dpi: int = 300, width: int = 0, height: int = 0) -> None:
        self._dpi = dpi
        self._size = (width, height) if width and height else None

    def render(self, document_path: Path, output_dir: Path) -> list[Path]:
        try:
            rendered = convert_from_path(
                str(document_path),
                dpi=self._dpi,
                size=self._size,
                output_folder=str(output_dir),
                output_file="page",
                fmt="png",
                paths_only=True,
            )
        except Exception as exc:
            raise PdfRenderError(f"pdf2image rendering failed: {exc}") from exc
        return [Path(path) for path in rendered]
