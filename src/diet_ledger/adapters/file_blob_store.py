"""Directory-backed blob store with one JSON file per key."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from diet_ledger.services.ledger import BlobStore


@dataclass
class FileBlobStore(BlobStore):
    """Stores each key as `<directory>/<key>.json`."""

    directory: Path

    def read(self, key: str) -> str | None:
        """Return the stored text for a key, if the file exists."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Replace the stored text for a key atomically."""
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, self._path(key))
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
