import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


DEFAULT_SETTINGS: Dict[str, Any] = {
    "version": "1.0.0",
    "message_api": "https://www.example.com/api/message?version=__VERSION__&language=__LANGUAGE__",
    "show_on_first_launch": False,
}


class JsonStore:
    """Settings and client state kept in one JSON file.

    Every ``set`` is written through to disk so the values survive a
    restart of the application.
    """

    def __init__(self, path: Path, defaults: Optional[Dict[str, Any]] = None):
        self._path = path
        self._lock = threading.RLock()
        self._data: Dict[str, Any] = {}
        self._defaults = dict(DEFAULT_SETTINGS if defaults is None else defaults)
        self._ensure_default()

    def _ensure_default(self) -> None:
        if not self._path.exists():
            self._data = dict(self._defaults)
            self.save()
        else:
            self.reload()
            # Fill in settings added after the file was written
            with self._lock:
                missing = {k: v for k, v in self._defaults.items() if k not in self._data}
                if missing:
                    self._data.update(missing)
                    self.save()

    def reload(self) -> None:
        with self._lock:
            with self._path.open("r", encoding="utf-8") as f:
                self._data = json.load(f)

    def save(self) -> None:
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as f:
                json.dump(self._data, f, ensure_ascii=False, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self.save()

    def get_all(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._data)
