from typing import Optional, Sequence

from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton, QHBoxLayout, QWidget
from PyQt6.QtCore import Qt

from pizzeria.core.config import popup_qss


class CustomMessageBox(QDialog):
    """Caixa modal com botões livres; o resultado é o índice do botão clicado."""

    def __init__(self, parent: Optional[QWidget] = None, title: str = "Mensagem", text: str = "",
                 buttons: Sequence[str] = ("OK",), default: int = 0, qss: Optional[str] = None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(320)
        layout = QVBoxLayout(self)
        label = QLabel(text)
        label.setWordWrap(True)
        label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(label)
        btn_layout = QHBoxLayout()
        btn_layout.addStretch(1)
        self._result: Optional[int] = None
        self._btns: list[QPushButton] = []
        for i, btxt in enumerate(buttons):
            btn = QPushButton(btxt)
            btn.clicked.connect(lambda _, ix=i: self._on_btn(ix))
            btn_layout.addWidget(btn)
            self._btns.append(btn)
        layout.addLayout(btn_layout)
        self.setStyleSheet(qss if qss is not None else popup_qss())
        self._btns[default].setDefault(True)
        self._btns[default].setFocus()

    def _on_btn(self, ix: int) -> None:
        self._result = ix
        self.accept()

    @staticmethod
    def show_message(parent: Optional[QWidget], title: str, text: str,
                     buttons: Sequence[str] = ("OK",), default: int = 0,
                     qss: Optional[str] = None) -> Optional[int]:
        dlg = CustomMessageBox(parent, title, text, buttons, default, qss)
        dlg.exec()
        return dlg._result

    @staticmethod
    def confirm(parent: Optional[QWidget], title: str, text: str,
                yes: str = "Sim", no: str = "Cancelar") -> bool:
        """Pergunta sim/não; fechar a janela conta como não."""
        return CustomMessageBox.show_message(parent, title, text, (no, yes), default=0) == 1
