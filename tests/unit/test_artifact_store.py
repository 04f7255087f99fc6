from pathlib import Path

import pytest

from ocr_service.artifacts.store import ArtifactStore


class TestRegisterUpload:
    def test_writes_bytes_to_upload_dir(self, artifact_store: ArtifactStore, tmp_path: Path) -> None:
        path = artifact_store.register_upload(b"%PDF data")

        assert path.parent == tmp_path / "uploads"
        assert path.read_bytes() == b"%PDF data"
        assert path.suffix == ".pdf"

    def test_paths_are_unique(self, artifact_store: ArtifactStore) -> None:
        paths = {artifact_store.register_upload(b"x") for _ in range(20)}
        assert len(paths) == 20

    def test_custom_suffix(self, artifact_store: ArtifactStore) -> None:
        assert artifact_store.register_upload(b"x", suffix=".png").suffix == ".png"


class TestCreatePageDir:
    def test_creates_distinct_directories(self, artifact_store: ArtifactStore) -> None:
        first = artifact_store.create_page_dir()
        second = artifact_store.create_page_dir()

        assert first.is_dir()
        assert second.is_dir()
        assert first != second


class TestDeletePath:
    def test_deletes_file(self, artifact_store: ArtifactStore) -> None:
        path = artifact_store.register_upload(b"x")
        artifact_store.delete_path(path)
        assert not path.exists()

    def test_deletes_directory_tree(self, artifact_store: ArtifactStore) -> None:
        page_dir = artifact_store.create_page_dir()
        (page_dir / "page-1.png").write_bytes(b"img")

        artifact_store.delete_path(page_dir)

        assert not page_dir.exists()

    def test_missing_path_is_ignored(self, artifact_store: ArtifactStore, tmp_path: Path) -> None:
        artifact_store.delete_path(tmp_path / "never-created.pdf")

    def test_deletion_error_is_swallowed(
        self, artifact_store: ArtifactStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = artifact_store.register_upload(b"x")

        def _refuse(self: Path, missing_ok: bool = False) -> None:
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "unlink", _refuse)

        artifact_store.delete_path(path)

    def test_delete_all(self, artifact_store: ArtifactStore) -> None:
        paths = [artifact_store.register_upload(b"x") for _ in range(3)]
        artifact_store.delete_all(paths)
        assert not any(path.exists() for path in paths)
