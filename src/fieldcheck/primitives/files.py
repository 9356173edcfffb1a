"""File name, content type and upload status checks."""

import logging
import mimetypes
from collections.abc import Sequence
from pathlib import Path, PurePath
from typing import Any

from ..errors import FileInspectionError
from ..values import UploadError, as_upload
from .scalars import in_list

logger = logging.getLogger(__name__)

SNIFF_BYTES = 512

# Leading bytes of common binary formats
_SIGNATURES: list[tuple[bytes, str]] = [
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"%PDF-", "application/pdf"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b", "application/gzip"),
]


def _as_list(values: str | Sequence[str]) -> list[str]:
    return [values] if isinstance(values, str) else list(values)


def extension(value: Any, extensions: str | Sequence[str] = ()) -> bool:
    """Validate a file name ends with one of ``extensions`` (case-insensitive).

    Args:
        value: File name, path, or upload (its ``name`` is used)
        extensions: Allowed extensions without the dot, e.g. ["gif", "jpg"]
    """
    upload = as_upload(value)
    if upload is not None:
        value = upload.name or "none"
    if not isinstance(value, str):
        return False

    basename = PurePath(value).name
    suffix = basename.rpartition(".")[2].lower() if "." in basename else ""
    return in_list(suffix, _as_list(extensions), case_insensitive=True)


def _sniff_markup(head: bytes) -> str | None:
    text = head.lstrip(b"\xef\xbb\xbf \t\r\n").lower()
    if text.startswith((b"<!doctype html", b"<html")):
        return "text/html"
    if text.startswith(b"<svg") or (text.startswith(b"<?xml") and b"<svg" in text):
        return "image/svg+xml"
    if text.startswith(b"<?xml"):
        return "text/xml"
    return None


def detect_mime_type(path: str | Path) -> str:
    """Detect the content type of a file from its leading bytes.

    Recognizes common image, archive and PDF signatures plus HTML, SVG and XML
    markup. Other text falls back to the file name, then text/plain.

    Raises:
        FileInspectionError: If the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            head = f.read(SNIFF_BYTES)
    except OSError as e:
        raise FileInspectionError(f"Unable to determine the mime type of {path}: {e}") from e

    if not head:
        return "application/x-empty"

    for signature, mime in _SIGNATURES:
        if head.startswith(signature):
            return mime

    markup = _sniff_markup(head)
    if markup:
        return markup

    guessed, _ = mimetypes.guess_type(str(path))
    try:
        head.decode("utf-8")
    except UnicodeDecodeError:
        # A multi-byte character may be cut at the end of the sample
        if b"\x00" in head:
            return guessed or "application/octet-stream"

    if guessed and guessed.startswith("text/"):
        return guessed
    return "text/plain"


def mime_type(value: Any, mime_types: str | Sequence[str] = ()) -> bool:
    """Validate a file's content type.

    Args:
        value: Path to the file, or an upload (its ``tmp_name`` is used)
        mime_types: Allowed types, e.g. "text/xml" or ["image/png", "image/gif"]

    Raises:
        FileInspectionError: If the file cannot be read
    """
    upload = as_upload(value)
    if upload is not None:
        value = upload.tmp_name
    if not isinstance(value, (str, Path)):
        raise FileInspectionError(f"No file to inspect: {value!r}")

    detected = detect_mime_type(value)
    logger.debug(f"Detected mime type {detected} for {value}")
    return detected in _as_list(mime_types)


def upload(value: Any, optional: bool = False) -> bool:
    """Validate a file was uploaded.

    Args:
        value: Upload status code, or an upload (its ``error`` is used)
        optional: Let the check pass when no file was submitted
    """
    file = as_upload(value)
    if file is not None:
        value = file.error
    if isinstance(value, bool) or not isinstance(value, int):
        return False

    if optional and value == UploadError.NO_FILE:
        return True
    return value == UploadError.OK
