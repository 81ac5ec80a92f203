from typing import Callable

from PySide6.QtCore import QObject, Qt, Signal, Slot


class UiDispatcher(QObject):
    """Runs callables on the thread this object lives on.

    Create it on the GUI thread and pass it to the client as ``ui_dispatch``;
    calls from the fetch thread are queued through a signal.
    """

    _invoke = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._invoke.connect(self._run, Qt.QueuedConnection)

    def __call__(self, fn: Callable[[], None]) -> None:
        self._invoke.emit(fn)

    @Slot(object)
    def _run(self, fn: Callable[[], None]) -> None:
        fn()
