import shutil
import uuid
from collections.abc import Iterable
from pathlib import Path

from ocr_service.logging.logger import Log


class ArtifactStore:
    """Owns the transient files a request creates and removes them.

    Every path handed out is uuid-named, so concurrent requests never
    collide. Deletion is best-effort: failures are logged, never raised.
    """

    def __init__(self, upload_dir: Path, page_image_dir: Path) -> None:
        self._upload_dir = upload_dir
        self._page_image_dir = page_image_dir

    def register_upload(self, content: bytes, suffix: str = ".pdf") -> Path:
        """Persist uploaded bytes to a fresh temporary file and return its path."""
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / f"{uuid.uuid4().hex}{suffix}"
        path.write_bytes(content)
        Log.debug(f"Registered upload {path.name}", size=len(content))
        return path

    def create_page_dir(self) -> Path:
        """Create an empty directory for one request's rendered pages."""
        path = self._page_image_dir / uuid.uuid4().hex
        path.mkdir(parents=True)
        return path

    def delete_path(self, path: Path) -> None:
        try:
            if path.is_dir():
                shutil.rmtree(path)
            else:
                path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Failed to delete temporary artifact {path}: {exc}")

    def delete_all(self, paths: Iterable[Path]) -> None:
        for path in paths:
            self.delete_path(path)
