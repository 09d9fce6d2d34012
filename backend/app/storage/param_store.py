"""Saved parameter store: a tiny JSON-file key-value store.

The creation studio keeps a list of parameter records under one key
(``kolamParams``). The store is the narrow interface: load, save, append,
clear. Callers own the records; the store only persists them.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from app.engine.context import GenerationParams

logger = logging.getLogger(__name__)

SAVED_PARAMS_KEY = "kolamParams"


class ParamStore:
    """JSON-file backed key-value store."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed store %s", self.path)
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)

    # --- Parameter records ---

    def _records(self, data: dict[str, Any]) -> list[Any]:
        records = data.get(SAVED_PARAMS_KEY, [])
        if not isinstance(records, list):
            logger.warning("Ignoring non-list %s in %s", SAVED_PARAMS_KEY, self.path)
            return []
        return records

    def load_params(self) -> list[GenerationParams]:
        with self._lock:
            return self._parse(self._records(self._read()))

    def _parse(self, records: list[Any]) -> list[GenerationParams]:
        params: list[GenerationParams] = []
        for record in records:
            try:
                params.append(GenerationParams(**record))
            except TypeError as e:
                logger.warning("Skipping malformed saved params %r: %s", record, e)
        return params

    def save_params(self, params: GenerationParams) -> list[GenerationParams]:
        """Append one record; returns the full saved list."""
        with self._lock:
            data = self._read()
            records = self._records(data)
            records.append(params.to_dict())
            data[SAVED_PARAMS_KEY] = records
            self._write(data)
        return self.load_params()

    def delete_params(self, index: int) -> list[GenerationParams]:
        """Remove the record at index of the loaded list; IndexError when out of range.

        Indices count loadable records only, so malformed entries are dropped
        from the file on the way.
        """
        with self._lock:
            data = self._read()
            params = self._parse(self._records(data))
            if not 0 <= index < len(params):
                raise IndexError(f"No saved params at index {index}")
            del params[index]
            data[SAVED_PARAMS_KEY] = [p.to_dict() for p in params]
            self._write(data)
            return params

    def clear_params(self) -> None:
        self.delete(SAVED_PARAMS_KEY)


_store: ParamStore | None = None


def get_param_store() -> ParamStore:
    """Get or create the singleton store at the configured path."""
    global _store
    if _store is None:
        from app.config import settings

        _store = ParamStore(settings.saved_params_file)
    return _store
