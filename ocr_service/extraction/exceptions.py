class ExtractionError(Exception):
    """Base exception for all extraction pipeline failures."""


class InputError(ExtractionError):
    """Raised when no document was provided or it exceeds the size limit."""


class DocumentTooLargeError(InputError):
    """Raised when an upload exceeds the configured size limit."""


class DocumentReadError(ExtractionError):
    """Raised when the stored upload cannot be read back from disk."""


class RenderError(ExtractionError):
    """Raised when no page of the document could be rasterized."""


class InsufficientContentError(ExtractionError):
    """Raised when neither tier produced enough text to accept."""
