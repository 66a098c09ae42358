# ABOUTME: Small key-value store for string lists and booleans, persisted as a JSON file.
# ABOUTME: Holds recent/favorite cities and the unit preference across runs.

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    """Get/set access to string lists and booleans by key."""

    def get_string_list(self, key: str) -> list[str]: ...

    def set_string_list(self, key: str, values: list[str]) -> None: ...

    def get_bool(self, key: str) -> bool: ...

    def set_bool(self, key: str, value: bool) -> None: ...


class MemoryPreferences:
    """In-process store with no persistence."""

    def __init__(self, initial: dict | None = None):
        self._data: dict = dict(initial or {})

    def get_string_list(self, key: str) -> list[str]:
        value = self._data.get(key)
        return [v for v in value if isinstance(v, str)] if isinstance(value, list) else []

    def set_string_list(self, key: str, values: list[str]) -> None:
        self._data[key] = list(values)

    def get_bool(self, key: str) -> bool:
        return self._data.get(key) is True

    def set_bool(self, key: str, value: bool) -> None:
        self._data[key] = bool(value)


class JsonPreferences(MemoryPreferences):
    """Store backed by a JSON object on disk, rewritten on every change.

    A missing file starts empty. A corrupt file is logged and treated as empty;
    it is overwritten on the next write.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        super().__init__(self._load())

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.exception("Could not read preferences from %s, starting empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preferences file %s does not hold an object, ignoring it", self.path)
            return {}
        return data

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".prefs-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def set_string_list(self, key: str, values: list[str]) -> None:
        super().set_string_list(key, values)
        self._save()

    def set_bool(self, key: str, value: bool) -> None:
        super().set_bool(key, value)
        self._save()
