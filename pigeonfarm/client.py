import enum
import logging
import threading
from typing import Callable, List, Optional, Protocol

from .actions import ActionDispatcher, UriOpener
from .errors import MissingConfigurationError, PigeonFarmError
from .events import ClientEvents
from .fetch import Fetcher, RequestsFetcher, decode_json
from .ledger import Ledger
from .types import Action, AppContext, ClientConfig, Message
from .url import assemble_url
from .validator import parse_message

logger = logging.getLogger(__name__)

UiDispatch = Callable[[Callable[[], None]], None]


class Presenter(Protocol):
    def present(
        self,
        title: str,
        body: str,
        actions: List[Action],
        on_select: Callable[[int], None],
    ) -> None:
        """Show the message. Call ``on_select`` with the index of the chosen
        action, or never if the message is dismissed without a choice."""


def run_inline(fn: Callable[[], None]) -> None:
    fn()


class State(enum.Enum):
    IDLE = "idle"
    CHECKING_FIRST_LAUNCH = "checking_first_launch"
    SUPPRESSED = "suppressed"
    FETCHING = "fetching"
    PARSING = "parsing"
    VALIDATING = "validating"
    DEDUPED = "deduped"
    PRESENTING = "presenting"
    RECORDING = "recording"
    FAILED = "failed"


class Outcome(enum.Enum):
    SUPPRESSED = "suppressed"
    DEDUPED = "deduped"
    SHOWN = "shown"
    FAILED = "failed"
    BUSY = "busy"


_TERMINAL_STATES = {
    Outcome.SUPPRESSED: State.SUPPRESSED,
    Outcome.DEDUPED: State.DEDUPED,
    Outcome.FAILED: State.FAILED,
    Outcome.SHOWN: State.IDLE,
}


class PigeonFarmClient:
    """Downloads the newest message and shows it once.

    ``show`` does the network work on a background thread. Presenting the
    message and handling the chosen button go through ``ui_dispatch`` so the
    host can move them onto its GUI thread. One engine handles one
    invocation at a time; calling ``show`` again while a message is still
    being loaded is ignored with a warning.
    """

    def __init__(
        self,
        config: ClientConfig,
        ledger: Ledger,
        presenter: Presenter,
        context: AppContext,
        fetcher: Optional[Fetcher] = None,
        events: Optional[ClientEvents] = None,
        opener: Optional[UriOpener] = None,
        ui_dispatch: Optional[UiDispatch] = None,
    ):
        self.config = config
        self.ledger = ledger
        self.presenter = presenter
        self.context = context
        self.fetcher = fetcher or RequestsFetcher()
        self.events = events or ClientEvents()
        self.dispatcher = ActionDispatcher(self.events, opener)
        self.ui_dispatch = ui_dispatch or run_inline

        self.state = State.IDLE
        self.last_outcome: Optional[Outcome] = None
        self.current_message: Optional[Message] = None
        self._busy = False
        self._lock = threading.Lock()

    def show(self, config: Optional[ClientConfig] = None) -> Optional[threading.Thread]:
        """Check for a new message in the background.

        Returns the worker thread, or None if no request was started.
        Raises ConfigurationError if no url is configured.
        """
        if not self._begin(config):
            return None
        thread = threading.Thread(target=self._run, name="pigeonfarm-fetch", daemon=True)
        thread.start()
        return thread

    def check(self, config: Optional[ClientConfig] = None) -> Outcome:
        """Same as ``show`` but loads the message on the calling thread."""
        if not self._begin(config):
            return self.last_outcome
        return self._run()

    def select_action(self, index: int) -> None:
        message = self.current_message
        if message is None or not 0 <= index < len(message.actions):
            logger.warning("Ignoring selection of unknown button %s", index)
            return
        self.dispatcher.dispatch(message.id, message.actions[index])

    def _begin(self, config: Optional[ClientConfig]) -> bool:
        config = config if config is not None else self.config
        if config is None or not config.url_template:
            raise MissingConfigurationError()

        with self._lock:
            if self._busy:
                logger.warning("A message check is already running, ignoring show()")
                self.last_outcome = Outcome.BUSY
                return False
            self._busy = True
            self.config = config
            self.state = State.CHECKING_FIRST_LAUNCH

        try:
            first_launch = self.ledger.is_first_launch()
            if first_launch:
                self.ledger.mark_launched()
        except Exception:
            logger.exception("Could not read launch state")
            self._finish(Outcome.FAILED)
            return False

        if first_launch and not self.config.show_on_first_launch:
            logger.info("Skipping message because of first launch")
            self._finish(Outcome.SUPPRESSED)
            return False
        return True

    def _run(self) -> Outcome:
        try:
            message = self._load()
        except PigeonFarmError as e:
            logger.warning("%s", e)
            return self._finish(Outcome.FAILED)
        except Exception:
            logger.exception("Unexpected error while loading message")
            return self._finish(Outcome.FAILED)

        try:
            if message.id == self.ledger.last_shown_id:
                logger.info("Message with id %s already shown", message.id)
                return self._finish(Outcome.DEDUPED)

            self.ui_dispatch(self._present)
        except Exception:
            logger.exception("Could not hand message %s to the presenter", message.id)
            return self._finish(Outcome.FAILED)
        with self._lock:
            # Still busy means presentation was queued onto the UI thread.
            if self._busy:
                return Outcome.SHOWN
            return self.last_outcome

    def _load(self) -> Message:
        self.state = State.FETCHING
        url = assemble_url(self.config.url_template, self.context)
        logger.info("Check for new message at url: %s", url)
        data = self.fetcher.fetch(url)

        self.state = State.PARSING
        value = decode_json(data)

        self.state = State.VALIDATING
        message = parse_message(value)
        self.current_message = message
        return message

    def _present(self) -> None:
        message = self.current_message
        self.state = State.PRESENTING
        try:
            self.presenter.present(
                message.title, message.body, list(message.actions), self.select_action
            )
        except Exception:
            logger.exception("Presenting message %s failed", message.id)
            self._finish(Outcome.FAILED)
            return
        self.events.emit_message_shown(message.id)

        self.state = State.RECORDING
        try:
            self.ledger.record_shown(message.id)
        except Exception:
            logger.exception("Could not record message %s as shown", message.id)
            self._finish(Outcome.FAILED)
            return
        self._finish(Outcome.SHOWN)

    def _finish(self, outcome: Outcome) -> Outcome:
        with self._lock:
            self.state = _TERMINAL_STATES[outcome]
            self.last_outcome = outcome
            self._busy = False
        return outcome
