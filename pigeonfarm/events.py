import logging
import threading
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

MessageShownCallback = Callable[[int], None]
ButtonTouchedCallback = Callable[[int, Dict[str, Any]], None]


class ClientEvents:
    """Listeners for what the message client does.

    Listeners are called synchronously, in the order they were connected,
    once per event. An exception in one listener is logged and does not
    keep the others from being called.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._message_shown: List[MessageShownCallback] = []
        self._button_touched: List[ButtonTouchedCallback] = []

    def connect_message_shown(self, callback: MessageShownCallback) -> None:
        with self._lock:
            self._message_shown.append(callback)

    def connect_button_touched(self, callback: ButtonTouchedCallback) -> None:
        with self._lock:
            self._button_touched.append(callback)

    def emit_message_shown(self, message_id: int) -> None:
        with self._lock:
            listeners = list(self._message_shown)
        for cb in listeners:
            self._call(cb, message_id)

    def emit_button_touched(self, message_id: int, button: Dict[str, Any]) -> None:
        with self._lock:
            listeners = list(self._button_touched)
        for cb in listeners:
            self._call(cb, message_id, button)

    @staticmethod
    def _call(cb: Callable[..., None], *args: Any) -> None:
        try:
            cb(*args)
        except Exception:
            logger.exception("Listener %r failed", cb)
