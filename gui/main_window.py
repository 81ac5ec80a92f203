from typing import Callable

from PySide6.QtCore import Signal, QObject
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QPlainTextEdit,
)


class BackendSignals(QObject):
    log_message = Signal(str)
    last_id_changed = Signal(object)


class MainWindow(QMainWindow):
    def __init__(
        self,
        signals: BackendSignals,
        on_check_message: Callable[[], None],
        version: str,
    ):
        super().__init__()
        self.signals = signals
        self.on_check_message = on_check_message

        self.setWindowTitle("PigeonFarm")
        self.resize(640, 400)

        self.status_label_version = QLabel(f"Version: {version}")
        self.status_label_last_id = QLabel("Last message: -")

        top_bar = QHBoxLayout()
        top_bar.addWidget(self.status_label_version)
        top_bar.addWidget(self.status_label_last_id)
        top_bar.addStretch()

        self.btn_check = QPushButton("Check for message")

        btn_bar = QHBoxLayout()
        btn_bar.addWidget(self.btn_check)
        btn_bar.addStretch()

        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)

        main_layout = QVBoxLayout()
        main_layout.addLayout(top_bar)
        main_layout.addLayout(btn_bar)
        main_layout.addWidget(self.log_view)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

        self.btn_check.clicked.connect(self.on_check_message)
        self.signals.log_message.connect(self.append_log)
        self.signals.last_id_changed.connect(self.on_last_id_changed)

    def append_log(self, text: str) -> None:
        self.log_view.appendPlainText(text)

    def on_last_id_changed(self, message_id) -> None:
        text = "-" if message_id is None else str(message_id)
        self.status_label_last_id.setText(f"Last message: {text}")
