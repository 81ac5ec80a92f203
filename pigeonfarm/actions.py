import logging
import webbrowser
from typing import Callable, Dict, Optional

from .events import ClientEvents
from .types import URL_ACTION, Action

logger = logging.getLogger(__name__)

UriOpener = Callable[[str], object]


class ActionDispatcher:
    """Runs the side effect of a button the user picked.

    Listeners are told about every touched button. Kinds without a handler
    in ``handlers`` have no further effect.
    """

    def __init__(self, events: ClientEvents, opener: Optional[UriOpener] = None):
        self.events = events
        self.opener = opener or webbrowser.open
        self.handlers: Dict[str, Callable[[Action], None]] = {
            URL_ACTION: self._open_url,
        }

    def dispatch(self, message_id: int, action: Action) -> None:
        self.events.emit_button_touched(message_id, action.raw)
        handler = self.handlers.get(action.kind)
        if handler is None:
            logger.debug("No handler for action kind %r", action.kind)
            return
        handler(action)

    def _open_url(self, action: Action) -> None:
        logger.info("Opening %s", action.target)
        try:
            self.opener(action.target)
        except Exception:
            logger.exception("Could not open %r", action.target)
