# toast.py
# Notificações flutuantes (sucesso / aviso / erro)

from typing import Any, Optional, cast

from PyQt6.QtCore import Qt, QTimer, QEasingCurve, QPropertyAnimation, QPoint
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget, QGraphicsDropShadowEffect

import qtawesome as qta

TOAST_STYLES = {
    "success": ("#16a34a", "ph.check-circle"),
    "warning": ("#d97706", "ph.warning"),
    "error": ("#dc2626", "ph.x-circle"),
}


class Toast(QFrame):
    """Pequena notificação flutuante no canto inferior direito."""
    def __init__(self, parent: Optional[QWidget], text: str, kind: str = "success", duration_ms: int = 2600) -> None:
        super().__init__(parent)
        self.setObjectName("Toast")
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.ToolTip)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        accent, icon_name = TOAST_STYLES.get(kind, TOAST_STYLES["success"])
        lay = QHBoxLayout(self)
        icon = QLabel()
        icon.setPixmap(qta.icon(icon_name, color=accent).pixmap(18, 18))
        lbl = QLabel(text)
        lay.addWidget(icon)
        lay.addWidget(lbl)
        lay.setContentsMargins(14, 10, 14, 10)
        self.setStyleSheet(f"""
        #Toast {{ background: rgba(20,24,36,0.95); color: #fff; border-radius: 10px; border-left: 4px solid {accent}; }}
        #Toast QLabel {{ color: #ffffff; }}
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
        x = geom.width() - self.width() - 24
        y = geom.height() - self.height() - 24
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


class ToastNotifier:
    """Notifier do serviço de clientes exibindo toasts sobre uma janela."""
    def __init__(self, parent: QWidget) -> None:
        self.parent = parent

    def _show(self, text: str, kind: str) -> None:
        Toast(self.parent, text, kind).show_near_bottom_right()

    def success(self, message: str) -> None:
        self._show(message, "success")

    def warning(self, message: str) -> None:
        self._show(message, "warning")

    def error(self, message: str) -> None:
        self._show(message, "error")
