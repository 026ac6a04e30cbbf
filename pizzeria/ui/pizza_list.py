# pizza_list.py
# Lista de pizzas exibida na tela principal

from typing import Any, List, Optional, cast

from PyQt6.QtCore import Qt, QPoint, pyqtSignal
from PyQt6.QtWidgets import QListWidget, QListWidgetItem, QWidget

from pizzeria.core.models import Pizza


def money(v: float) -> str:
    """Formata valor no padrão brasileiro: R$ 1.234,56"""
    return f"R$ {v:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


class PizzaListWidget(QListWidget):
    """
    Mostra uma linha por pizza. Clique emite pizza_clicked (editar);
    menu de contexto emite pizza_long_pressed (excluir).
    """
    pizza_clicked = pyqtSignal(object)
    pizza_long_pressed = pyqtSignal(object)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("PizzaList")
        self.setAlternatingRowColors(True)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        cast(Any, self.itemClicked).connect(self._on_item_clicked)
        cast(Any, self.customContextMenuRequested).connect(self._on_context_menu)

    def set_pizza_list(self, pizzas: List[Pizza]) -> None:
        self.clear()
        for pizza in pizzas:
            text = f"{pizza.name}\n{pizza.ingredients} - {money(pizza.price)}"
            item = QListWidgetItem(text)
            item.setData(Qt.ItemDataRole.UserRole, pizza)
            item.setToolTip(f"{pizza.size} cm · {pizza.status_label}")
            self.addItem(item)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        pizza = item.data(Qt.ItemDataRole.UserRole)
        if pizza is not None:
            self.pizza_clicked.emit(pizza)

    def _on_context_menu(self, pos: QPoint) -> None:
        item = self.itemAt(pos)
        if item is None:
            return
        pizza = item.data(Qt.ItemDataRole.UserRole)
        if pizza is not None:
            self.pizza_long_pressed.emit(pizza)
