"""Named-slot key-value stores for app state."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Process-wide storage addressed by slot name."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class JsonFileKeyValueStore:
    """Keeps every slot as a string value inside one JSON object file."""

    def __init__(self, path: str, logger_instance=None) -> None:
        self.path = str(path or "").strip()
        self.logger = logger_instance or logger
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._read_payload_locked().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            self.logger.warning("Ignoring non-text value in app state slot: %s", key)
            return None
        return value

    def set(self, key: str, value: str) -> None:
        parent = os.path.dirname(os.path.abspath(self.path))
        if parent:
            os.makedirs(parent, exist_ok=True)
        with self._lock:
            payload = self._read_payload_locked()
            payload[key] = str(value)
            tmp_handle = tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                delete=False,
                suffix=".tmp",
                dir=parent or None,
            )
            tmp_path = tmp_handle.name
            try:
                with tmp_handle:
                    json.dump(payload, tmp_handle, ensure_ascii=False, indent=2, sort_keys=True)
                    tmp_handle.write("\n")
                os.replace(tmp_path, self.path)
            except Exception:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise

    def _read_payload_locked(self) -> dict[str, object]:
        if not self.path or not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except Exception:
            self.logger.exception("Failed to read app state: %s", self.path)
            return {}
        if not isinstance(payload, dict):
            self.logger.warning("App state file is not a JSON object: %s", self.path)
            return {}
        return payload


class MemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = str(value)
