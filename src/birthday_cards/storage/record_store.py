from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Sequence

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class JsonRecordStore:
    """Ordered list of records kept in one pretty-printed JSON file.

    Every load reads the whole file and every save replaces it. There is no
    locking: two concurrent read-modify-write cycles can lose one update.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    def _ensure_directory(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def _file_mode(self) -> int:
        # Existing files keep their mode; new files get the umask default.
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def load(self) -> list[Record]:
        # Missing and unreadable files both read as an empty collection.
        try:
            self._ensure_directory()
            if not self._path.exists():
                return []
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, treating as empty: %s", self._path, e)
            return []

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.warning("Unexpected content in %s, treating as empty", self._path)
            return []
        return data

    def save(self, records: Sequence[Record]) -> None:
        payload = json.dumps(list(records), indent=2, ensure_ascii=False)
        try:
            self._ensure_directory()
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.chmod(tmp_name, self._file_mode())
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.exception("Failed to write %s", self._path)
            raise StorageError(f"Failed to write {self._path.name}") from e
