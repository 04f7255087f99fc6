from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from ocr_service.extraction.models import (
    PageImage,
    PageRecognitionOutcome,
    RecognitionFailed,
    RecognizedText,
)
from ocr_service.logging.logger import Log
from ocr_service.ocr.base import BasePageRecognizer


class PageRecognitionRunner:
    """Recognizes every rendered page, isolating failures page by page.

    With ``max_workers == 1`` pages are processed in order on the calling
    thread. Larger values use a bounded thread pool; outcomes are slotted by
    page index, so the returned list is in page order either way.
    """

    def __init__(self, recognizer: BasePageRecognizer, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._recognizer = recognizer
        self._max_workers = max_workers

    def run(self, pages: Sequence[PageImage]) -> list[PageRecognitionOutcome]:
        ordered = sorted(pages, key=lambda page: page.index)
        if self._max_workers == 1 or len(ordered) <= 1:
            return [self._recognize_page(page, len(ordered)) for page in ordered]

        slots: dict[int, PageRecognitionOutcome] = {}
        workers = min(self._max_workers, len(ordered))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ocr-page") as pool:
            futures = {
                page.index: pool.submit(self._recognize_page, page, len(ordered))
                for page in ordered
            }
            for index, future in futures.items():
                slots[index] = future.result()
        return [slots[page.index] for page in ordered]

    def _recognize_page(self, page: PageImage, total: int) -> PageRecognitionOutcome:
        Log.info(f"Recognizing page {page.index}/{total}")
        try:
            text = self._recognizer.recognize(page.path)
        except Exception as exc:
            Log.error(f"OCR failed for page {page.index}: {exc}")
            return RecognitionFailed(index=page.index, reason=str(exc))
        return RecognizedText(index=page.index, text=text)
