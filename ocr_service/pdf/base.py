from abc import ABC, abstractmethod
from pathlib import Path


class BasePdfExtractor(ABC):
    """Contract for all structural PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the embedded text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text as a single stripped string (may be empty).

        Raises:
            PdfExtractionError: if the document cannot be parsed.
        """


class BasePageRenderer(ABC):
    """Contract for all page rasterization adapters."""

    @abstractmethod
    def render(self, document_path: Path, output_dir: Path) -> list[Path]:
        """Render every page of a document to an image file.

        Args:
            document_path: Path of the stored document.
            output_dir: Request-owned directory that receives the images.

        Returns:
            Image paths ordered by page number (first page first).

        Raises:
            PdfRenderError: if the document cannot be rasterized at all.
        """
