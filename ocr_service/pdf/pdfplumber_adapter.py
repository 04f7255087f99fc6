import io

import pdfplumber

from ocr_service.pdf.base import BasePdfExtractor
from ocr_service.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Reads the embedded text layer with pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
