from abc import ABC, abstractmethod
from pathlib import Path


class BasePageRecognizer(ABC):
    """Contract for OCR adapters that read one page image at a time."""

    @abstractmethod
    def recognize(self, image_path: Path) -> str:
        """Recognize the text on one rendered page.

        Implementations must acquire and release their engine resources
        inside the call, so that concurrent calls never share engine state.

        Raises:
            RecognitionError: if the page cannot be recognized.
        """
