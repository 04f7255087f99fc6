from pathlib import Path
from unittest.mock import patch

import pytest

from ocr_service.pdf.exceptions import PdfRenderError
from ocr_service.pdf.pdf2image_renderer import Pdf2ImageRenderer


class TestPdf2ImageRenderer:
    def test_passes_rasterization_parameters(self, tmp_path: Path) -> None:
        with patch(
            "ocr_service.pdf.pdf2image_renderer.convert_from_path",
            return_value=[str(tmp_path / "page0001-1.png"), str(tmp_path / "page0001-2.png")],
        ) as mock_convert:
            paths = Pdf2ImageRenderer(dpi=300, width=2000, height=2800).render(
                tmp_path / "doc.pdf", tmp_path
            )

        mock_convert.assert_called_once_with(
            str(tmp_path / "doc.pdf"),
            dpi=300,
            size=(2000, 2800),
            output_folder=str(tmp_path),
            output_file="page",
            fmt="png",
            paths_only=True,
        )
        assert paths == [tmp_path / "page0001-1.png", tmp_path / "page0001-2.png"]

    def test_no_canvas_means_native_size(self, tmp_path: Path) -> None:
        with patch(
            "ocr_service.pdf.pdf2image_renderer.convert_from_path", return_value=[]
        ) as mock_convert:
            Pdf2ImageRenderer(dpi=150).render(tmp_path / "doc.pdf", tmp_path)

        assert mock_convert.call_args.kwargs["size"] is None

    def test_wraps_poppler_errors(self, tmp_path: Path) -> None:
        with patch(
            "ocr_service.pdf.pdf2image_renderer.convert_from_path",
            side_effect=Exception("Unable to get page count"),
        ):
            with pytest.raises(PdfRenderError, match="page count"):
                Pdf2ImageRenderer().render(tmp_path / "doc.pdf", tmp_path)
