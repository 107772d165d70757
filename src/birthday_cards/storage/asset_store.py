from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Upload:
    """An uploaded file detached from the web framework."""

    data: bytes
    file_name: str


def extension_of(file_name: str) -> str:
    """Text after the last dot, or "" when the name has none."""
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[1]


class AssetStore:
    """Stores uploaded files under the public directory.

    Returned references are URL paths such as ``/photos/<uuid>.png`` which
    are both served by the app and embedded in emails.
    No size or content-type checks are done here.
    """

    def __init__(self, public_dir: Path | str):
        self._public_dir = Path(public_dir)

    def directory(self, subdir: str) -> Path:
        return self._public_dir / subdir

    def store(self, data: bytes, original_file_name: str, subdir: str) -> str:
        ext = extension_of(original_file_name or "")
        file_name = f"{uuid.uuid4()}.{ext}" if ext else str(uuid.uuid4())
        target_dir = self.directory(subdir)

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            (target_dir / file_name).write_bytes(data)
        except OSError as e:
            logger.exception("Failed to store asset %s in %s", original_file_name, target_dir)
            raise StorageError("Failed to store uploaded file") from e

        return f"/{subdir}/{file_name}"
