# -*- coding: utf-8 -*-
# Alfaiataria – Medidas de Clientes (PyQt6 + Supabase)
# -----------------------------------------------------
# Requisitos:
#   pip install -e .
#
# Observações:
# - Clientes ficam na tabela `customers` do Supabase (SUPABASE_URL / SUPABASE_ANON_KEY
#   no ambiente ou supabase_url / supabase_key no config.yaml).
# - Sem Supabase configurado, usa um SQLite local (database_path ou ./data/alfaiataria.db).
# - Uma única tela: pesquisa, formulário de medidas (camisa/calça) e tabela.
# - Chamadas ao armazenamento rodam em QThread; toasts para sucesso/erro.
#
# Como executar:
#   python Alfaiataria.py

from __future__ import annotations

import sys
from typing import Any, cast

from PyQt6.QtCore import QSize
from PyQt6.QtGui import QCloseEvent, QGuiApplication
from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel

from core.config import load_config, get_store_settings, popup_qss
from core.exceptions import ConfigError
from core.logger import setup_logging, log_event, log_error, log_startup
from core.services import CustomerService
from core.store import open_store
from ui.customers_page import CustomersPage, safe_qta_icon
from ui.dialogs.custom_messagebox import CustomMessageBox, make_confirm
from ui.toast import ToastNotifier
from ui.workers import QtRunner


class MainWindow(QMainWindow):
    def __init__(self, store: Any, store_kind: str):
        super().__init__()
        self.setWindowTitle("Alfaiataria - Medidas de Clientes")
        self.setWindowIcon(safe_qta_icon("ph.scissors", color="#2563eb"))

        # Tamanho automático baseado na tela disponível
        screen = QGuiApplication.primaryScreen()
        if screen:
            geo = screen.availableGeometry()
            self.resize(int(geo.width() * 0.7), int(geo.height() * 0.75))
        else:
            self.resize(1100, 700)
        self.setMinimumSize(800, 600)

        self.runner = QtRunner(self)
        self.service = CustomerService(
            store,
            notifier=ToastNotifier(self),
            confirm=make_confirm(self),
            runner=self.runner,
        )

        root = QWidget(); root.setObjectName("RightArea")
        self.setCentralWidget(root)
        v = QVBoxLayout(root)
        v.setContentsMargins(0, 0, 0, 0)

        # Header
        header = QWidget(); header.setObjectName("Header")
        hl = QHBoxLayout(header)
        icon = QLabel()
        icon.setPixmap(safe_qta_icon("ph.scissors", color="#2563eb").pixmap(QSize(26, 26)))
        title = QLabel("Alfaiataria"); title.setObjectName("AppTitle")
        source = QLabel("Supabase" if store_kind == "supabase" else "Banco local")
        source.setObjectName("subtitle")
        hl.addWidget(icon); hl.addWidget(title); hl.addStretch(1); hl.addWidget(source)
        v.addWidget(header)

        self.page = CustomersPage(self.service)
        v.addWidget(self.page, 1)

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self.runner.wait_all()
        log_event("Aplicação encerrada")
        super().closeEvent(event)


def qss_light() -> str:
    return """
* { font-family: 'Segoe UI', Arial; font-size: 14px; color: #1f2937; outline: none; }
QMainWindow { background: #f7f9fc; }
#Header { background: qlineargradient(x1:0,y1:0,x2:1,y2:0, stop:0 #ffffff, stop:1 #eef2ff); border-bottom: 1px solid #dfe3ec; }
#AppTitle { color: #1b2240; font-size: 20px; font-weight: 600; }
QLabel#subtitle { color: #6b7280; }
QFrame#Card { background: #ffffff; border: 1px solid #e5e7eb; border-radius: 12px; }
QLineEdit { background: #ffffff; border: 1px solid #d1d5db; border-radius: 8px; padding: 6px; }
QLineEdit:focus { border: 1px solid #3b82f6; }
QPushButton {
    background: #e5e7eb;
    color: #111827;
    padding: 8px 14px;
    border: 1px solid #d1d5db;
    border-radius: 10px;
}
QPushButton:hover { background: #dbeafe; border: 1px solid #bfdbfe; }
QPushButton:pressed { background: #c7d2fe; border: 1px solid #a5b4fc; }
QPushButton#PrimaryButton { background: #2563eb; color: #ffffff; border: 1px solid #1d4ed8; }
QPushButton#PrimaryButton:hover { background: #1d4ed8; }
QPushButton#PrimaryButton:disabled { background: #93c5fd; border: 1px solid #93c5fd; }
QPushButton#IconButton {
    padding: 0px;
    min-width: 28px; max-width: 28px;
    min-height: 28px; max-height: 28px;
    border-radius: 14px;
    background: transparent;
    border: none;
}
QPushButton#IconButton:hover { background: #dbeafe; }
QTableWidget {
    background: #ffffff;
    alternate-background-color: #f8fafc;
    color: #111827;
    gridline-color: #e5e7eb;
    border: 1px solid #e5e7eb;
    border-radius: 4px;
}
QTableWidget::item { padding: 8px; }
QTableWidget::item:selected { background: #e8eefc; color: #1b2240; }
QHeaderView::section { background: #f3f4f6; color: #6b7280; padding: 6px; border: none; }
"""


def qss_dark() -> str:
    return """
* { font-family: 'Segoe UI', Arial; font-size: 14px; color: #e5e7eb; outline: none; }
QMainWindow, QWidget#RightArea { background: #111827; }
#Header { background: #0f172a; border-bottom: 1px solid #1f2937; }
#AppTitle { color: #f9fafb; font-size: 20px; font-weight: 600; }
QLabel#subtitle { color: #9ca3af; }
QFrame#Card { background: #1f2937; border: 1px solid #374151; border-radius: 12px; }
QLineEdit { background: #111827; border: 1px solid #374151; border-radius: 8px; padding: 6px; color: #f3f4f6; }
QLineEdit:focus { border: 1px solid #3b82f6; }
QPushButton {
    background: #1a2031;
    color: #ffffff;
    padding: 8px 14px;
    border: 1px solid #2c3550;
    border-radius: 10px;
}
QPushButton:hover { background: #252c45; border: 1px solid #3d4a70; }
QPushButton:pressed { background: #333b5e; border: 1px solid #4a5480; }
QPushButton#PrimaryButton { background: #2563eb; border: 1px solid #1d4ed8; }
QPushButton#PrimaryButton:disabled { background: #1e3a8a; color: #9ca3af; }
QPushButton#IconButton {
    padding: 0px;
    min-width: 28px; max-width: 28px;
    min-height: 28px; max-height: 28px;
    border-radius: 14px;
    background: transparent;
    border: none;
}
QPushButton#IconButton:hover { background: #252c45; }
QTableWidget {
    background: #1f2937;
    alternate-background-color: #18212f;
    color: #f3f4f6;
    gridline-color: #374151;
    border: 1px solid #374151;
}
QTableWidget::item { padding: 8px; }
QTableWidget::item:selected { background: #3b4252; }
QHeaderView::section { background: #111827; color: #9ca3af; padding: 6px; border: none; }
"""


def main() -> None:
    log_path = setup_logging()
    config = load_config()
    theme = config.get("theme", "light")

    app = QApplication(sys.argv)
    app.setStyleSheet(qss_dark() if theme == "dark" else qss_light())

    try:
        settings = get_store_settings(config)
        store = open_store(settings)
    except ConfigError as e:
        log_error("Configuração inválida", e)
        CustomMessageBox.show_message(None, "Configuração", str(e), ("OK",), qss=popup_qss(theme))
        sys.exit(1)
    except Exception as e:
        log_error("Erro ao abrir o armazenamento", e)
        CustomMessageBox.show_message(None, "Erro", f"Não foi possível abrir o armazenamento:\n{e}",
                                      ("OK",), qss=popup_qss(theme))
        sys.exit(1)

    log_startup(log_path, settings.kind)
    log_event(f"Tema aplicado: {theme}")

    win = MainWindow(store, settings.kind)
    win.show()
    win.service.load()
    sys.exit(cast(Any, app).exec())


if __name__ == "__main__":
    main()
