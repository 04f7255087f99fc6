from ocr_service.config.settings import Settings
from ocr_service.pdf.base import BasePageRenderer, BasePdfExtractor
from ocr_service.pdf.pdf2image_renderer import Pdf2ImageRenderer
from ocr_service.pdf.pdfplumber_adapter import PdfPlumberAdapter
from ocr_service.pdf.pymupdf_adapter import PyMuPdfAdapter, PyMuPdfRenderer


class PdfExtractorFactory:
    """Creates the structural text extractor selected in settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class PageRendererFactory:
    """Creates the page renderer selected in settings."""

    RENDERERS: dict[str, type[Pdf2ImageRenderer] | type[PyMuPdfRenderer]] = {
        "pdf2image": Pdf2ImageRenderer,
        "pymupdf": PyMuPdfRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePageRenderer:
        name = settings.pdf_renderer.lower()
        renderer_cls = cls.RENDERERS.get(name)
        if renderer_cls is None:
            raise ValueError(
                f"Unknown PDF renderer '{name}'. Choose from: {list(cls.RENDERERS)}"
            )
        return renderer_cls(
            dpi=settings.render_dpi,
            width=settings.render_width,
            height=settings.render_height,
        )
