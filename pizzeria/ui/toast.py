# toast.py
# Notificação flutuante (toast) no canto inferior direito

from typing import Any, Optional, cast

from PyQt6.QtCore import Qt, QTimer, QEasingCurve, QPropertyAnimation, QPoint
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget, QGraphicsDropShadowEffect


class Toast(QFrame):
    """Pequena notificação flutuante no canto inferior direito."""
    def __init__(self, parent: Optional[QWidget], text: str, duration_ms: int = 2200) -> None:
        super().__init__(parent)
        self.setObjectName("Toast")
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.ToolTip)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose, True)
        lay = QHBoxLayout(self)
        lbl = QLabel(text)
        lay.addWidget(lbl)
        lay.setContentsMargins(14, 10, 14, 10)
        self.setStyleSheet("""
        #Toast { background: rgba(20,24,36,0.95); color: #fff; border-radius: 10px; border:1px solid #2a3350; }
        #Toast QLabel { color: #ffffff; }
        """)
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(18)
        shadow.setOffset(0, 6)
        self.setGraphicsEffect(shadow)
        self._duration = duration_ms
        self._anim = QPropertyAnimation(self, b"pos", self)
        self._anim.setDuration(280)
        self._anim.setEasingCurve(QEasingCurve.Type.OutCubic)

    def show_near_bottom_right(self) -> None:
        parent = self.parentWidget()
        if not parent:
            self.show()
            return
        geom = parent.frameGeometry()
        self.adjustSize()
        # ToolTip é janela de topo: posição em coordenadas globais
        origin = parent.mapToGlobal(QPoint(0, 0))
        x = origin.x() + geom.width() - self.width() - 24
        y = origin.y() + geom.height() - self.height() - 24
        start = QPoint(x, y + 24)
        end = QPoint(x, y)
        self.move(start)
        self.show()
        self.raise_()
        self._anim.stop()
        self._anim.setStartValue(start)
        self._anim.setEndValue(end)
        self._anim.start()
        cast(Any, QTimer).singleShot(self._duration, self.close)
