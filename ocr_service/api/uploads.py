from fastapi import UploadFile

from ocr_service.extraction.exceptions import DocumentTooLargeError

_CHUNK_SIZE = 1024 * 1024


async def read_upload(upload: UploadFile, limit_bytes: int) -> bytes:
    """Read an uploaded file, refusing it as soon as it exceeds ``limit_bytes``.

    Raises:
        DocumentTooLargeError: if the upload is larger than the limit.
    """
    chunks: list[bytes] = []
    total = 0
    while chunk := await upload.read(_CHUNK_SIZE):
        total += len(chunk)
        if total > limit_bytes:
            raise DocumentTooLargeError(
                f"Upload exceeds the {limit_bytes} byte limit"
            )
        chunks.append(chunk)
    return b"".join(chunks)
