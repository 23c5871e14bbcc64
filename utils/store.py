"""
JSON file store for fetched facts.

Each saved record becomes its own file, ``<root>/<key>.json``, where the key
is a freshly generated UUID4. Writes go to a temporary file in the same
directory and are renamed into place, so a failed save never leaves a partial
record behind.
"""

import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Union

import orjson
from pydantic import ValidationError

from utils.errors import StoreError
from utils.schemas import CatFact

logger = logging.getLogger(__name__)

SUFFIX = ".json"


class JsonFileStore:
    """Key-value store persisting one CatFact per file."""

    def __init__(self, root: Path) -> None:
        self.root = root

    @classmethod
    def open(cls, directory: Union[str, Path]) -> "JsonFileStore":
        """
        Open the store rooted at ``directory``, creating it if needed.

        Raises:
            StoreError: If the directory cannot be created
        """
        root = Path(directory)
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot open store at {root}: {e}") from e

        if not root.is_dir():
            raise StoreError(f"Store path is not a directory: {root}")

        logger.debug("Store ready: root=%s", str(root))
        return cls(root)

    def _path_for(self, key: str) -> Path:
        return self.root / f"{key}{SUFFIX}"

    def save(self, record: CatFact) -> str:
        """
        Persist ``record`` under a new key.

        Returns:
            The generated key

        Raises:
            StoreError: If the record cannot be written
        """
        key = str(uuid.uuid4())
        data = orjson.dumps(record.to_wire())
        target = self._path_for(key)

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError(f"Failed to save record {key}: {e}") from e

        return key

    def get(self, key: str) -> CatFact:
        """
        Load the record stored under ``key``.

        Raises:
            StoreError: If the key is unknown or the file is unreadable
        """
        path = self._path_for(key)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise StoreError(f"No record with key {key}") from e
        except OSError as e:
            raise StoreError(f"Failed to read record {key}: {e}") from e

        try:
            return CatFact.model_validate(orjson.loads(data))
        except (orjson.JSONDecodeError, ValidationError) as e:
            raise StoreError(f"Stored record {key} is corrupt: {e}") from e

    def keys(self) -> list[str]:
        """Return the keys of all stored records, sorted."""
        return sorted(p.stem for p in self.root.glob(f"*{SUFFIX}") if p.is_file())
