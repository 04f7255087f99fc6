class PdfError(Exception):
    """Base exception for PDF collaborator failures."""


class PdfExtractionError(PdfError):
    """Raised when the embedded text layer cannot be read."""


class PdfRenderError(PdfError):
    """Raised when pages cannot be rasterized to images."""
