"""Upload, delete, download and preview inside one namespace."""

import base64
import logging
from dataclasses import dataclass
from pathlib import Path

from filehub.core.exceptions import (
    EmptyUploadError,
    FileConflictError,
    FileNotFoundInNamespaceError,
)
from filehub.core.listing import file_extension
from filehub.core.namespace import file_path

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
TEXT_EXTENSIONS = {
    ".js", ".c", ".cpp", ".h", ".cs",
    ".txt", ".xml", ".json", ".html", ".css",
}

# Reported for every image preview whatever its real format
PREVIEW_IMAGE_MIME = "image/png"


@dataclass(frozen=True)
class PreviewResult:
    type: str
    base64: str | None = None
    mime: str | None = None
    text: str | None = None

    def as_dict(self) -> dict:
        return {k: v for k, v in vars(self).items() if v is not None}


def upload_file(namespace: Path, file_name: str | None, content: bytes | None, overwrite: bool = False) -> Path:
    """Write ``content`` to ``namespace/file_name``.

    Raises:
        EmptyUploadError: no content or no file name.
        InvalidNameError: the name is not a single path segment.
        FileConflictError: the file exists and ``overwrite`` is false.
    """
    if not content or not file_name:
        raise EmptyUploadError()

    target = file_path(namespace, file_name)
    if target.exists() and not overwrite:
        logger.info("Upload conflict, file exists: %s", target)
        raise FileConflictError(file_name)

    # Not atomic: a failed write leaves a partial file behind
    target.write_bytes(content)
    logger.info("Stored %s (%d bytes, overwrite=%s)", target, len(content), overwrite)
    return target


def delete_file(namespace: Path, file_name: str) -> None:
    target = file_path(namespace, file_name)
    if target.is_file():
        target.unlink()
        logger.info("Deleted %s", target)
    else:
        logger.debug("Nothing to delete at %s", target)


def open_for_download(namespace: Path, file_name: str) -> Path:
    target = file_path(namespace, file_name)
    if not target.is_file():
        raise FileNotFoundInNamespaceError(file_name)
    return target


def preview_file(
    namespace: Path,
    file_name: str,
    text_encoding: str = "utf-8-sig",
    max_bytes: int | None = None,
) -> PreviewResult:
    """Build an inline preview, choosing the variant by file extension.

    Images come back base64 encoded, text and source files decoded with
    ``text_encoding``. Everything else, and anything above ``max_bytes``
    when a limit is set, is reported as unsupported without reading it.
    """
    target = open_for_download(namespace, file_name)
    ext = file_extension(target.name)

    if ext not in IMAGE_EXTENSIONS and ext not in TEXT_EXTENSIONS:
        return PreviewResult(type="unsupported")

    if max_bytes is not None and target.stat().st_size > max_bytes:
        logger.info("Preview skipped, %s exceeds %d bytes", target, max_bytes)
        return PreviewResult(type="unsupported")

    if ext in IMAGE_EXTENSIONS:
        data = base64.b64encode(target.read_bytes()).decode("ascii")
        logger.debug("Image preview for %s", target)
        return PreviewResult(type="image", base64=data, mime=PREVIEW_IMAGE_MIME)

    text = target.read_bytes().decode(text_encoding, errors="replace")
    logger.debug("Text preview for %s", target)
    return PreviewResult(type="text", text=text)
