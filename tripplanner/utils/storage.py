"""
File storage for uploaded documents and images.

Two backends share the same small interface (put/get/delete by key):
a local directory, served under ``/files``, and a remote storage API
reached over HTTP. ``STORAGE_BACKEND`` picks one at startup.
"""
from pathlib import Path
from typing import Optional
import secrets
import httpx
from fastapi import HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from tripplanner.core.config import settings
from tripplanner.core.logger import logger

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
ALLOWED_PDF_TYPES = {"application/pdf"}
ALLOWED_DOCUMENT_TYPES = ALLOWED_IMAGE_TYPES | ALLOWED_PDF_TYPES

_EXTENSION_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "pdf": "application/pdf",
}


class StorageError(Exception):
    pass


class LocalFileStorage:
    def __init__(self, base_dir: Path, public_prefix: str = "/files"):
        self.base_dir = Path(base_dir)
        self.public_prefix = public_prefix.rstrip("/")
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        path = (self.base_dir / key).resolve()
        if self.base_dir.resolve() not in path.parents:
            raise StorageError(f"Invalid storage key: {key}")
        return path

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def put(self, key: str, data: bytes, content_type: Optional[str] = None) -> str:
        await run_in_threadpool(self._write, self._path(key), data)
        return f"{self.public_prefix}/{key}"

    async def get(self, key: str) -> bytes:
        path = self._path(key)
        if not await run_in_threadpool(path.is_file):
            raise StorageError(f"File not found: {key}")
        return await run_in_threadpool(path.read_bytes)

    async def delete(self, key: str) -> None:
        path = self._path(key)
        await run_in_threadpool(path.unlink, missing_ok=True)


class RemoteStorage:
    """Object storage behind an HTTP API (upload/download/delete by path)."""

    def __init__(self, base_url: str, api_key: str, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    @property
    def _headers(self) -> dict:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def put(self, key: str, data: bytes, content_type: Optional[str] = None) -> str:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(
                    f"{self.base_url}/v1/storage/upload",
                    params={"path": key},
                    files={"file": (key.rsplit("/", 1)[-1], data, content_type or "application/octet-stream")},
                    headers=self._headers,
                )
                resp.raise_for_status()
                return resp.json()["url"]
        except (httpx.HTTPError, KeyError, ValueError) as e:
            raise StorageError(f"Upload failed for {key}: {e}") from e

    async def get(self, key: str) -> bytes:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(
                    f"{self.base_url}/v1/storage/download",
                    params={"path": key},
                    headers=self._headers,
                )
                resp.raise_for_status()
                return resp.content
        except httpx.HTTPError as e:
            raise StorageError(f"Download failed for {key}: {e}") from e

    async def delete(self, key: str) -> None:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.delete(
                    f"{self.base_url}/v1/storage/object",
                    params={"path": key},
                    headers=self._headers,
                )
                resp.raise_for_status()
        except httpx.HTTPError as e:
            raise StorageError(f"Delete failed for {key}: {e}") from e


_storage = None


def get_storage():
    """FastAPI dependency returning the configured storage backend."""
    global _storage
    if _storage is None:
        if settings.STORAGE_BACKEND == "remote":
            _storage = RemoteStorage(settings.STORAGE_API_URL, settings.STORAGE_API_KEY)
        else:
            _storage = LocalFileStorage(Path(settings.STORAGE_LOCAL_DIR))
        logger.info(f"Using {settings.STORAGE_BACKEND} file storage")
    return _storage


def random_suffix(length: int = 8) -> str:
    return secrets.token_hex(length // 2)


def safe_filename(filename: Optional[str]) -> str:
    name = Path(filename or "file").name
    return "".join(ch if ch.isalnum() or ch in "._-" else "_" for ch in name) or "file"


def resolve_content_type(file: UploadFile) -> Optional[str]:
    content_type = file.content_type
    if (not content_type or content_type == "application/octet-stream") and file.filename and "." in file.filename:
        content_type = _EXTENSION_TYPES.get(file.filename.lower().rsplit(".", 1)[-1], content_type)
    return content_type


async def read_upload(file: UploadFile, allowed_types: set, max_size: int = None) -> tuple:
    """Validate type and size of an upload and return ``(bytes, content_type)``."""
    max_size = max_size or settings.MAX_UPLOAD_SIZE_BYTES
    content_type = resolve_content_type(file)
    if not content_type or content_type not in allowed_types:
        raise HTTPException(
            status_code=400,
            detail=f"File type not allowed: {content_type or 'unknown'}"
        )

    data = await file.read()
    if len(data) > max_size:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {max_size // (1024 * 1024)} MB"
        )
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    return data, content_type
