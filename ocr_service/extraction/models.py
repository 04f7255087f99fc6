from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ExtractionMethod(str, Enum):
    """Tier that produced the final text."""

    STRUCTURAL = "structural"
    RECOGNITION = "recognition"


@dataclass(frozen=True)
class ExtractionRequest:
    """An accepted upload waiting for extraction.

    ``document_path`` is owned by the request: the orchestrator deletes it
    before returning, whatever the outcome.
    """

    document_path: Path
    original_filename: str
    size_limit_bytes: int
    module_id: str = "unknown"


@dataclass(frozen=True)
class PageImage:
    """A rendered page; ``index`` is the 1-based page number."""

    index: int
    path: Path


@dataclass(frozen=True)
class RecognizedText:
    index: int
    text: str


@dataclass(frozen=True)
class RecognitionFailed:
    index: int
    reason: str


PageRecognitionOutcome = RecognizedText | RecognitionFailed


@dataclass(frozen=True)
class ExtractionOutcome:
    """Successful extraction result returned to the service boundary."""

    text: str
    method: ExtractionMethod
    character_count: int
    page_count: int = 0
    failed_pages: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Accepted:
    text: str


@dataclass(frozen=True)
class Rejected:
    reason: str


ValidationResult = Accepted | Rejected
