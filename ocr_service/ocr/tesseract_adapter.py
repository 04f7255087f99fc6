"""Tesseract OCR adapter bound to a single fixed recognition profile."""

import shlex
import string
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import pytesseract
from PIL import Image

from ocr_service.ocr.base import BasePageRecognizer
from ocr_service.ocr.exceptions import RecognitionError

CHAR_WHITELIST = string.ascii_letters + string.digits + " .,;:!?-()[]{}/\"'"


def build_tesseract_config(page_segmentation_mode: int, whitelist: str) -> str:
    """Build the tesseract CLI options for the recognition profile.

    The whitelist contains quotes and spaces, so it is shell-quoted to survive
    pytesseract's ``shlex.split`` of the config string.
    """
    whitelist_option = shlex.quote(f"tessedit_char_whitelist={whitelist}")
    return f"--psm {page_segmentation_mode} -c {whitelist_option}"


class TesseractRecognizer(BasePageRecognizer):
    """Runs one tesseract process per page inside a scoped engine session."""

    def __init__(
        self,
        *,
        language: str = "eng",
        page_segmentation_mode: int = 1,
        timeout_seconds: int = 120,
        tesseract_cmd: str = "",
        whitelist: str = CHAR_WHITELIST,
    ) -> None:
        self._language = language
        self._config = build_tesseract_config(page_segmentation_mode, whitelist)
        self._timeout_seconds = timeout_seconds
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_path: Path) -> str:
        with self._session(image_path) as image:
            try:
                return pytesseract.image_to_string(
                    image,
                    lang=self._language,
                    config=self._config,
                    timeout=self._timeout_seconds,
                )
            except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
                raise RecognitionError(f"tesseract failed on {image_path.name}: {exc}") from exc
            except RuntimeError as exc:
                # TesseractError is a RuntimeError too; a bare one means the process was killed
                raise RecognitionError(
                    f"tesseract timed out after {self._timeout_seconds}s on {image_path.name}"
                ) from exc

    @contextmanager
    def _session(self, image_path: Path) -> Iterator[Image.Image]:
        """Load the page image for one recognition and always release it."""
        try:
            image = Image.open(image_path)
            image.load()
        except OSError as exc:
            raise RecognitionError(f"Cannot open page image {image_path}: {exc}") from exc
        try:
            yield image
        finally:
            image.close()
