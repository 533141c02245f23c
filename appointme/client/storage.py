"""Durable key-value storage for tokens, kept in a small JSON file."""

import json
import logging
import os
from pathlib import Path
from typing import Any

ACCESS_TOKEN = "accessToken"
REFRESH_TOKEN = "refreshToken"

logger = logging.getLogger(__name__)


class TokenStorage:
    """A dict persisted to disk after every write."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open(encoding="utf-8") as f:
            try:
                data = json.load(f)
            except ValueError:
                # Replaced by the next write
                logger.warning(f"Ignoring unreadable token file {self.path}")
                return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Any:
        return self._read().get(key)

    def set_item(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        self._write({})
