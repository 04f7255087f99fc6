class RecognitionError(Exception):
    """Raised when a single page image cannot be recognized."""
