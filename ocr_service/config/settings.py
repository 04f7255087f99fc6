from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    service_name: str = "OCR & AI Service"
    service_version: str = "2.0.0"

    max_upload_bytes: int = 50 * 1024 * 1024
    upload_dir: str = "/tmp/uploads"
    page_image_dir: str = "/tmp/pdf-images"

    pdf_engine: str = "pdfplumber"
    pdf_renderer: str = "pdf2image"
    render_dpi: int = 300
    render_width: int = 2000
    render_height: int = 2800

    tesseract_cmd: str = ""
    ocr_language: str = "eng"
    ocr_page_segmentation_mode: int = 1
    ocr_page_timeout_seconds: int = 120
    ocr_max_workers: int = 1

    assistant_provider: str = "anthropic"
    assistant_timeout_seconds: int = 60
    assistant_concepts_max_tokens: int = 4000
    assistant_chat_max_tokens: int = 1000

    assistant_anthropic_api_key: str = Field(
        "",
        validation_alias=AliasChoices("ASSISTANT_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY"),
    )
    assistant_anthropic_model_name: str = "claude-3-5-sonnet-20241022"

    assistant_openai_api_key: str = ""
    assistant_openai_model_name: str = ""

    assistant_openai_compatible_api_key: str = ""
    assistant_openai_compatible_model_name: str = ""
    assistant_openai_compatible_base_url: str = ""
