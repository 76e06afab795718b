# customers_page.py
# Página de clientes: pesquisa, formulário de medidas e tabela

from typing import Any, Dict, cast

from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit, QPushButton,
    QTableWidget, QTableWidgetItem, QHeaderView, QFrame,
)

import qtawesome as qta

from core.models import Customer
from core.services import CustomerService
from core.state import AppState

COLUMNS = ["Nome", "Medidas da Camisa", "Medidas da Calça", "Telefone", "Ações"]


def safe_qta_icon(icon_name: str, color: str = "#000000"):
    """Retorna ícone QtAwesome; nome inválido vira ícone vazio"""
    try:
        return qta.icon(icon_name, color=color)
    except Exception:
        return QIcon()


class BasePage(QWidget):
    def __init__(self, title: str, subtitle: str = "") -> None:
        super().__init__()
        self.v = QVBoxLayout(self)
        head = QWidget()
        hl = QHBoxLayout(head)
        t = QLabel(f"<h2 style='margin:0'>{title}</h2>")
        s = QLabel(subtitle)
        s.setObjectName("subtitle")
        hl.addWidget(t)
        hl.addStretch(1)
        hl.addWidget(s)
        self.v.addWidget(head)
        self.body = QWidget()
        self.v.addWidget(self.body)
        self.v.setContentsMargins(16, 16, 16, 16)


class CustomersPage(BasePage):
    def __init__(self, service: CustomerService) -> None:
        super().__init__("Medidas de Clientes", "Camisas e calças sob medida")
        self.service = service
        bl = QVBoxLayout(self.body)

        # Barra de pesquisa (filtro por nome/telefone)
        search_box = QHBoxLayout()
        lbl_search = QLabel()
        lbl_search.setPixmap(safe_qta_icon("ph.magnifying-glass", color="#9aa3b2").pixmap(18, 18))
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Pesquisar por nome ou telefone…")
        self.search_edit.setClearButtonEnabled(True)
        cast(Any, self.search_edit.textChanged).connect(self.service.search)
        search_box.addStretch(1)
        search_box.addWidget(lbl_search)
        search_box.addWidget(self.search_edit, 1)
        bl.addLayout(search_box)

        # Formulário (criação / edição)
        card = QFrame(); card.setObjectName("Card")
        cl = QVBoxLayout(card)
        self.form_title = QLabel()
        self.form_title.setObjectName("FormTitle")
        cl.addWidget(self.form_title)
        grid = QGridLayout()
        self.inputs: Dict[str, QLineEdit] = {}
        form_rows = [
            ("name", "Nome *", "Nome do cliente"),
            ("shirt", "Medidas da Camisa *", 'ex.: Peito: 40", Manga: 34"'),
            ("pants", "Medidas da Calça *", 'ex.: Cintura: 32", Comprimento: 30"'),
            ("phone", "Telefone", "Número de telefone"),
        ]
        for i, (field, label, placeholder) in enumerate(form_rows):
            edit = QLineEdit()
            edit.setPlaceholderText(placeholder)
            # textEdited: só edições do usuário (não as feitas pelo render)
            cast(Any, edit.textEdited).connect(lambda text, f=field: self.service.set_field(f, text))
            cast(Any, edit.returnPressed).connect(self.service.submit)
            box = QVBoxLayout()
            box.addWidget(QLabel(label))
            box.addWidget(edit)
            grid.addLayout(box, i // 2, i % 2)
            self.inputs[field] = edit
        cl.addLayout(grid)

        actions = QHBoxLayout()
        actions.addStretch(1)
        self.btn_cancel = QPushButton("Cancelar")
        cast(Any, self.btn_cancel.clicked).connect(self.service.cancel_edit)
        self.btn_submit = QPushButton()
        self.btn_submit.setObjectName("PrimaryButton")
        self.btn_submit.setIcon(safe_qta_icon("ph.plus-circle", color="#ffffff"))
        cast(Any, self.btn_submit.clicked).connect(self.service.submit)
        actions.addWidget(self.btn_cancel)
        actions.addWidget(self.btn_submit)
        cl.addLayout(actions)
        bl.addWidget(card)

        # Tabela de clientes
        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setAlternatingRowColors(True)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        if header := self.table.horizontalHeader():
            header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
            header.setSectionResizeMode(len(COLUMNS) - 1, QHeaderView.ResizeMode.Fixed)
            self.table.setColumnWidth(len(COLUMNS) - 1, 96)
        if vh := self.table.verticalHeader():
            vh.setVisible(False)
        bl.addWidget(self.table, 1)

        self._rendered_key = None
        self.service.subscribe(self.render)
        self.render(self.service.state)

    def render(self, state: AppState) -> None:
        editing = state.is_editing
        self.form_title.setText("<h3 style='margin:0'>Editar Cliente</h3>" if editing
                                else "<h3 style='margin:0'>Novo Cliente</h3>")
        for field, edit in self.inputs.items():
            value = getattr(state.form, field)
            if edit.text() != value:
                edit.setText(value)
        self.btn_cancel.setVisible(editing)
        self.btn_submit.setEnabled(not state.loading)
        if state.loading:
            self.btn_submit.setText("Aguarde…")
        else:
            self.btn_submit.setText("Atualizar Cliente" if editing else "Adicionar Cliente")
        if state.view_key != self._rendered_key:
            self._rendered_key = state.view_key
            self._render_table(state)

    def _render_table(self, state: AppState) -> None:
        rows = state.filtered
        self.table.clearSpans()
        self.table.setRowCount(0)
        if not rows:
            self.table.insertRow(0)
            empty = QTableWidgetItem("Nenhum cliente encontrado")
            empty.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            empty.setFlags(Qt.ItemFlag.ItemIsEnabled)
            self.table.setItem(0, 0, empty)
            self.table.setSpan(0, 0, 1, len(COLUMNS))
            return
        for c in rows:
            row = self.table.rowCount(); self.table.insertRow(row)
            self.table.setItem(row, 0, QTableWidgetItem(c.name))
            self.table.setItem(row, 1, QTableWidgetItem(c.shirt))
            self.table.setItem(row, 2, QTableWidgetItem(c.pants))
            self.table.setItem(row, 3, QTableWidgetItem(c.phone))
            self.table.setCellWidget(row, 4, self._row_actions(c))
            self.table.setRowHeight(row, 48)

    def _row_actions(self, customer: Customer) -> QWidget:
        container = QWidget()
        lay = QHBoxLayout(container)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setAlignment(Qt.AlignmentFlag.AlignCenter)
        for icon, color, tip, slot in (
            ("ph.pencil-simple", "#2563eb", "Editar cliente", self.service.edit),
            ("ph.trash", "#dc2626", "Excluir cliente", self.service.delete),
        ):
            btn = QPushButton(); btn.setObjectName("IconButton")
            btn.setToolTip(tip)
            btn.setFlat(True)
            btn.setIcon(safe_qta_icon(icon, color=color))
            btn.setIconSize(QSize(18, 18))
            btn.setFixedSize(28, 28)
            cast(Any, btn.clicked).connect(lambda _c=False, cust=customer, s=slot: s(cust))
            lay.addWidget(btn)
        return container
