# main_window.py
# Janela principal: lista do cardápio + botão de inclusão

from typing import Any, List, cast

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton

from pizzeria.core.context import AppContext
from pizzeria.core.forms import PizzaController
from pizzeria.core.models import Pizza
from pizzeria.ui.dialogs.custom_messagebox import CustomMessageBox
from pizzeria.ui.dialogs.pizza_dialog import PizzaDialog
from pizzeria.ui.pizza_list import PizzaListWidget
from pizzeria.ui.toast import Toast


class MainWindow(QMainWindow):
    # A lista chega da thread do worker; o sinal a entrega na thread da interface
    pizzas_changed = pyqtSignal(object)

    def __init__(self, ctx: AppContext) -> None:
        super().__init__()
        self.ctx = ctx
        self.service = ctx.create_service()
        self.controller = PizzaController(self.service, self.show_toast)
        self.setWindowTitle("Pizzaria - Cardápio")
        self.resize(520, 720)

        central = QWidget()
        v = QVBoxLayout(central)
        v.setContentsMargins(16, 16, 16, 16)
        head = QHBoxLayout()
        title = QLabel("<h2 style='margin:0'>Cardápio</h2>")
        self.count_label = QLabel("")
        self.count_label.setObjectName("subtitle")
        head.addWidget(title)
        head.addStretch(1)
        head.addWidget(self.count_label)
        v.addLayout(head)

        self.pizza_list = PizzaListWidget()
        v.addWidget(self.pizza_list, 1)

        self.btn_add: QPushButton = QPushButton("+ Adicionar pizza")
        v.addWidget(self.btn_add)
        self.setCentralWidget(central)

        cast(Any, self.btn_add.clicked).connect(self.add)
        cast(Any, self.pizza_list.pizza_clicked).connect(self.edit)
        cast(Any, self.pizza_list.pizza_long_pressed).connect(self.delete)
        cast(Any, self.pizzas_changed).connect(self._on_pizzas_changed)
        self._unsubscribe = self.service.get_all_pizzas().observe(self.pizzas_changed.emit)

    def _on_pizzas_changed(self, pizzas: List[Pizza]) -> None:
        self.pizza_list.set_pizza_list(pizzas)
        self.count_label.setText(f"{len(pizzas)} pizza(s)")

    def show_toast(self, text: str) -> None:
        Toast(self, text).show_near_bottom_right()

    def add(self) -> None:
        PizzaDialog(self.controller, None, self).exec()

    def edit(self, pizza: Pizza) -> None:
        PizzaDialog(self.controller, pizza, self).exec()

    def delete(self, pizza: Pizza) -> None:
        if CustomMessageBox.confirm(self, "Excluir pizza?", self.controller.confirm_delete_text(pizza),
                                    yes="Excluir"):
            self.controller.delete(pizza)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._unsubscribe()
        self.service.close()
        super().closeEvent(event)
