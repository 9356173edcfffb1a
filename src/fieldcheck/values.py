"""Value shapes understood by the primitives.

Field values are plain scalars, containers, ``None`` or file uploads. Uploads
arrive either as a :class:`FileUpload` or as a mapping carrying the usual
``name`` / ``tmp_name`` / ``error`` keys.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

UPLOAD_KEYS = ("name", "tmp_name", "error")


class UploadError(IntEnum):
    """Upload status codes."""
    OK = 0
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8


@dataclass(frozen=True)
class FileUpload:
    """A submitted file."""
    name: str | None = None
    tmp_name: str | None = None
    error: int = UploadError.OK
    type: str | None = None
    size: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "FileUpload":
        return cls(
            name=data.get("name"),
            tmp_name=data.get("tmp_name"),
            error=data.get("error", UploadError.OK),
            type=data.get("type"),
            size=data.get("size"),
        )


def as_upload(value: Any) -> FileUpload | None:
    """Return ``value`` as a FileUpload when it is upload-shaped, else None."""
    if isinstance(value, FileUpload):
        return value
    if isinstance(value, Mapping) and any(key in value for key in UPLOAD_KEYS):
        return FileUpload.from_mapping(value)
    return None


def is_empty(value: Any) -> bool:
    """Check whether a value counts as empty.

    A value is empty when it is ``None``, a blank string, an empty container,
    or an upload without a temporary file. Numbers and booleans are never empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, FileUpload):
        return not value.tmp_name
    if isinstance(value, Mapping):
        return len(value) == 0 or ("tmp_name" in value and not value["tmp_name"])
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False
