"""Content acceptance policies for the extraction tiers (all strict `>`)."""

from ocr_service.extraction.models import Accepted, Rejected, ValidationResult

STRUCTURAL_MIN_CHARS = 100
PAGE_MIN_CHARS = 10
FINAL_MIN_CHARS = 50


def is_structural_sufficient(text: str) -> bool:
    """True when the embedded text layer is rich enough to skip OCR."""
    return len(text.strip()) > STRUCTURAL_MIN_CHARS


def is_page_text_usable(text: str) -> bool:
    """True when one recognized page carries more than noise."""
    return len(text.strip()) > PAGE_MIN_CHARS


class ResultValidator:
    """Final safety net applied to the text of whichever tier was used."""

    def __init__(self, min_chars: int = FINAL_MIN_CHARS) -> None:
        self._min_chars = min_chars

    def validate(self, candidate_text: str) -> ValidationResult:
        trimmed = candidate_text.strip()
        if len(trimmed) > self._min_chars:
            return Accepted(text=trimmed)
        return Rejected(
            reason=(
                f"Extracted text has {len(trimmed)} characters, "
                f"more than {self._min_chars} characters required"
            )
        )
