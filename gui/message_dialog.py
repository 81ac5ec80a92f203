from typing import Callable, List, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QTextEdit,
    QDialogButtonBox,
    QWidget,
)

from pigeonfarm.types import Action


class MessageDialog(QDialog):
    action_selected = Signal(int)

    def __init__(self, title: str, body: str, labels: List[str], parent=None):
        super().__init__(parent)
        self.setWindowTitle(title or "Message")

        label_title = QLabel(title)
        label_title.setStyleSheet("font-weight: bold; font-size: 14pt;")
        label_title.setWordWrap(True)

        content = QTextEdit()
        content.setPlainText(body)
        content.setReadOnly(True)

        buttons = QDialogButtonBox()
        for index, label in enumerate(labels):
            btn = buttons.addButton(label, QDialogButtonBox.ActionRole)
            # Use default arg to capture loop variable
            btn.clicked.connect(lambda checked=False, i=index: self._on_clicked(i))
        if not labels:
            buttons.addButton(QDialogButtonBox.Ok)
            buttons.accepted.connect(self.accept)

        layout = QVBoxLayout()
        layout.addWidget(label_title)
        layout.addWidget(content)
        layout.addWidget(buttons)
        self.setLayout(layout)

    def _on_clicked(self, index: int) -> None:
        self.action_selected.emit(index)
        self.accept()


class QtPresenter:
    """Shows messages as window-modal dialogs. Must be used on the GUI thread."""

    def __init__(self, parent: Optional[QWidget] = None):
        self.parent = parent
        self._dialogs: List[MessageDialog] = []

    def present(
        self,
        title: str,
        body: str,
        actions: List[Action],
        on_select: Callable[[int], None],
    ) -> None:
        dlg = MessageDialog(title, body, [a.label for a in actions], self.parent)
        dlg.action_selected.connect(on_select)
        # Keep a reference until the dialog is closed
        self._dialogs.append(dlg)
        dlg.finished.connect(lambda _result, d=dlg: self._dialogs.remove(d))
        dlg.open()
