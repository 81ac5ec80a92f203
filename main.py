import logging
import sys
from pathlib import Path

from PySide6.QtCore import QLocale, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QApplication, QStyle

from pigeonfarm.client import PigeonFarmClient
from pigeonfarm.ledger import Ledger
from pigeonfarm.store import JsonStore
from pigeonfarm.types import AppContext, ClientConfig

from gui.dispatch import UiDispatcher
from gui.main_window import MainWindow, BackendSignals
from gui.message_dialog import QtPresenter

logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
logger = logging.getLogger(__name__)


def main() -> None:
    app = QApplication(sys.argv)
    app.setApplicationName("PigeonFarm")

    # Set default icon
    icon = app.style().standardIcon(QStyle.SP_MessageBoxInformation)
    app.setWindowIcon(icon)

    store = JsonStore(Path("config.json"))
    data = store.get_all()
    version = data.get("version", "1.0.0")

    signals = BackendSignals()
    ledger = Ledger(store)

    def on_check_message() -> None:
        if not config.url_template:
            logger.warning("No message url configured")
            signals.log_message.emit("No message url configured")
            return
        signals.log_message.emit("Checking for a new message...")
        client.show()

    win = MainWindow(signals=signals, on_check_message=on_check_message, version=version)

    config = ClientConfig.from_settings(data)
    client = PigeonFarmClient(
        config=config,
        ledger=ledger,
        presenter=QtPresenter(win),
        context=AppContext(version=version, languages=list(QLocale.system().uiLanguages())),
        opener=lambda url: QDesktopServices.openUrl(QUrl(url)),
        ui_dispatch=UiDispatcher(app),
    )

    def on_message_shown(message_id: int) -> None:
        signals.log_message.emit(f"Showing message {message_id}")
        signals.last_id_changed.emit(message_id)

    def on_button_touched(message_id: int, button: dict) -> None:
        signals.log_message.emit(f"Message {message_id}: touched '{button.get('title', '')}'")

    client.events.connect_message_shown(on_message_shown)
    client.events.connect_button_touched(on_button_touched)

    win.on_last_id_changed(ledger.last_shown_id)
    win.show()

    # Initial check
    on_check_message()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
