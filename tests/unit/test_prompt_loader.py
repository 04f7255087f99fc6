"""Tests for concept prompt template loading."""

from pathlib import Path

import pytest

from ocr_service.assistant.exceptions import AssistantError
from ocr_service.assistant.prompt_loader import load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{file_name}" in template
        assert "{text}" in template

    def test_default_template_formats_cleanly(self) -> None:
        rendered = load_prompt_template().format(file_name="a.pdf", text="body")
        assert '"a.pdf"' in rendered
        assert '"concepts": [' in rendered

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {text}")
        assert load_prompt_template(custom) == "Hello {text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(AssistantError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))
