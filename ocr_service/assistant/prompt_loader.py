from pathlib import Path

from ocr_service.assistant.exceptions import AssistantError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the concept extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled concepts_prompt.txt.

    Returns:
        The raw template string with ``{file_name}`` and ``{text}`` placeholders.

    Raises:
        AssistantError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "concepts_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AssistantError(f"Failed to load prompt template: {exc}") from exc
