# pizza_dialog.py
# Diálogo de inclusão/edição de pizza

from typing import Any, Optional, cast

from PyQt6.QtWidgets import (
    QDialog, QFormLayout, QLineEdit, QComboBox, QDialogButtonBox, QWidget
)

from pizzeria.core.config import popup_qss
from pizzeria.core.forms import PizzaController, PizzaForm
from pizzeria.core.models import Pizza, STATUSES, STATUS_LABELS


class PizzaDialog(QDialog):
    """
    Formulário de pizza. Sem pizza = inclusão; com pizza = edição dela.

    O botão de salvar só fecha o diálogo quando o controller aceita os dados;
    em caso de erro a mensagem aparece como toast e o usuário pode corrigir.
    """

    def __init__(self, controller: PizzaController, pizza: Optional[Pizza] = None,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.pizza = pizza
        self.is_editing = pizza is not None
        self.setStyleSheet(popup_qss())
        self.setWindowTitle("Editar pizza" if self.is_editing else "Adicionar nova pizza")
        self.setMinimumWidth(380)

        layout = QFormLayout(self)
        self.name: QLineEdit = QLineEdit()
        self.ingredients: QLineEdit = QLineEdit()
        self.price: QLineEdit = QLineEdit()
        self.price.setPlaceholderText("Ex: 150.00")
        self.size: QLineEdit = QLineEdit()
        self.size.setPlaceholderText("Ex: 30")
        self.description: QLineEdit = QLineEdit()
        self.status: QComboBox = QComboBox()
        for status in STATUSES:
            self.status.addItem(STATUS_LABELS[status], status)

        layout.addRow("Nome:", self.name)
        layout.addRow("Ingredientes:", self.ingredients)
        layout.addRow("Preço (R$):", self.price)
        layout.addRow("Tamanho (cm):", self.size)
        layout.addRow("Descrição:", self.description)
        layout.addRow("Status:", self.status)

        btns = QDialogButtonBox(QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel)
        save_btn = btns.button(QDialogButtonBox.StandardButton.Save)
        if save_btn:
            save_btn.setText("Atualizar" if self.is_editing else "Adicionar")
        cancel_btn = btns.button(QDialogButtonBox.StandardButton.Cancel)
        if cancel_btn:
            cancel_btn.setText("Cancelar")
        cast(Any, btns.accepted).connect(self._save)
        cast(Any, btns.rejected).connect(self.reject)
        layout.addRow(btns)

        if pizza is not None:
            self._fill(PizzaForm.from_pizza(pizza))

    def _fill(self, form: PizzaForm) -> None:
        self.name.setText(form.name)
        self.ingredients.setText(form.ingredients)
        self.price.setText(form.price)
        self.size.setText(form.size)
        self.description.setText(form.description)
        idx = self.status.findData(form.status)
        if idx >= 0:
            self.status.setCurrentIndex(idx)

    def get_form(self) -> PizzaForm:
        return PizzaForm(
            name=self.name.text(),
            ingredients=self.ingredients.text(),
            price=self.price.text(),
            size=self.size.text(),
            description=self.description.text(),
            status=str(self.status.currentData()),
            is_editing=self.is_editing,
            existing_id=self.pizza.id if self.pizza is not None else None,
        )

    def _save(self) -> None:
        if self.controller.submit(self.get_form()):
            self.accept()
