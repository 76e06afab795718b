# custom_messagebox.py
# Caixa de mensagem modal com o tema do app + confirmação sim/não

from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton, QHBoxLayout, QWidget

from core.config import popup_qss


class CustomMessageBox(QDialog):
    def __init__(self, parent: Optional[QWidget] = None, title: str = "Mensagem", text: str = "",
                 buttons: Sequence[str] = ("OK",), default: int = 0, qss: Optional[str] = None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(340)
        layout = QVBoxLayout(self)
        label = QLabel(text)
        label.setWordWrap(True)
        label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(label)
        btn_layout = QHBoxLayout()
        btn_layout.addStretch(1)
        # None = fechado sem escolher (Esc ou X)
        self.result_index: Optional[int] = None
        self._btns: List[QPushButton] = []
        for i, btxt in enumerate(buttons):
            btn = QPushButton(btxt)
            btn.setAutoDefault(i == default)
            btn.clicked.connect(lambda _, ix=i: self._choose(ix))
            btn_layout.addWidget(btn)
            self._btns.append(btn)
        layout.addLayout(btn_layout)
        self.setStyleSheet(qss if qss is not None else popup_qss())
        self._btns[default].setFocus()

    def _choose(self, ix: int) -> None:
        self.result_index = ix
        self.accept()

    @staticmethod
    def show_message(parent: Optional[QWidget], title: str, text: str, buttons: Sequence[str] = ("OK",),
                     default: int = 0, qss: Optional[str] = None) -> Optional[int]:
        dlg = CustomMessageBox(parent, title, text, buttons, default, qss)
        dlg.exec()
        return dlg.result_index


def make_confirm(parent: Optional[QWidget], title: str = "Confirmação") -> Callable[[str], bool]:
    """Confirmação sim/não bloqueante no formato esperado pelo CustomerService."""
    def confirm(text: str) -> bool:
        # "Não" é o padrão para evitar exclusão acidental com Enter
        return CustomMessageBox.show_message(parent, title, text, ("Não", "Sim"), default=0) == 1
    return confirm
