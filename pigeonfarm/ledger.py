import logging
import threading
from typing import Optional

from .store import KeyValueStore

logger = logging.getLogger(__name__)

# Cannot be renamed, existing installs store the last shown id under it.
LAST_ID_KEY = "SMUpdateMessageLastID"
# Whether the client ran before, not the value of show_on_first_launch.
LAUNCHED_BEFORE_KEY = "SMPigeonFarmClientLaunchedBefore"

_UNLOADED = object()


class Ledger:
    """Remembers which message was shown last and whether the client ran before."""

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._lock = threading.RLock()
        self._last_id = _UNLOADED

    def is_first_launch(self) -> bool:
        return not bool(self._store.get(LAUNCHED_BEFORE_KEY, False))

    def mark_launched(self) -> None:
        self._store.set(LAUNCHED_BEFORE_KEY, True)

    @property
    def last_shown_id(self) -> Optional[int]:
        with self._lock:
            if self._last_id is _UNLOADED:
                self._last_id = self._store.get(LAST_ID_KEY)
            return self._last_id

    def record_shown(self, message_id: int) -> None:
        with self._lock:
            self._store.set(LAST_ID_KEY, message_id)
            self._last_id = message_id
        logger.debug("Recorded message %s as shown", message_id)
