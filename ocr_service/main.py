import uvicorn

from ocr_service.api.app import create_app
from ocr_service.config.settings import Settings
from ocr_service.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the HTTP API."""
    settings = Settings()
    Log.configure(settings.log_level)

    app = create_app(settings)
    Log.info(f"{settings.service_name} running on port {settings.port}")
    Log.info(f"PDF engine: {settings.pdf_engine}, renderer: {settings.pdf_renderer}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
