# forms.py
# Conversão do formulário de pizza e tratamento dos eventos da tela

from dataclasses import dataclass
from typing import Callable, Optional

from pizzeria.core.errors import ParseError, ValidationError
from pizzeria.core.logger import log_event, log_warning
from pizzeria.core.models import Pizza, STATUS_AVAILABLE
from pizzeria.core.services import PizzaService

MSG_REQUIRED = "Nome, ingredientes, preço e tamanho são obrigatórios!"
MSG_BAD_NUMBER = "Por favor, informe números válidos para preço e tamanho."
MSG_ADDED = "Pizza adicionada com sucesso!"
MSG_UPDATED = "Pizza atualizada com sucesso!"


@dataclass
class PizzaForm:
    """Valores como vieram da tela: preço e tamanho ainda são texto."""
    name: str
    ingredients: str
    price: str
    size: str
    description: str = ""
    status: str = STATUS_AVAILABLE
    is_editing: bool = False
    existing_id: Optional[int] = None

    @classmethod
    def from_pizza(cls, pizza: Pizza) -> "PizzaForm":
        """Formulário preenchido para edição."""
        return cls(
            name=pizza.name,
            ingredients=pizza.ingredients,
            price=str(pizza.price),
            size=str(pizza.size),
            description=pizza.description or "",
            status=pizza.status,
            is_editing=True,
            existing_id=pizza.id,
        )


def parse_pizza_form(form: PizzaForm) -> Pizza:
    """
    Converte o formulário em Pizza.

    Raises:
        ValidationError: campo obrigatório vazio ou regra da entidade violada
        ParseError: preço ou tamanho não numéricos
    """
    name = (form.name or "").strip()
    ingredients = (form.ingredients or "").strip()
    price_str = (form.price or "").strip()
    size_str = (form.size or "").strip()
    description = (form.description or "").strip()

    if not name or not ingredients or not price_str or not size_str:
        raise ValidationError(MSG_REQUIRED)

    try:
        price = float(price_str)
        size = int(size_str)
    except ValueError as e:
        raise ParseError(MSG_BAD_NUMBER) from e

    return Pizza(
        id=form.existing_id if form.is_editing else None,
        name=name,
        ingredients=ingredients,
        price=price,
        size=size,
        description=description,
        status=form.status,
    )


class PizzaController:
    """
    Liga os eventos da tela ao PizzaService.

    notify recebe as mensagens curtas exibidas ao usuário (toast).
    """

    def __init__(self, service: PizzaService, notify: Callable[[str], None]):
        self.service = service
        self.notify = notify

    def submit(self, form: PizzaForm) -> bool:
        """Retorna True se o formulário foi aceito e enviado para gravação."""
        try:
            pizza = parse_pizza_form(form)
        except ParseError as e:
            log_warning(f"Formulário rejeitado: {e}")
            self.notify(str(e))
            return False
        except ValidationError as e:
            log_warning(f"Formulário rejeitado: {e}")
            msg = str(e)
            self.notify(msg if msg == MSG_REQUIRED else f"Erro de entrada: {msg}")
            return False

        if form.is_editing:
            self.service.update(pizza)
            log_event(f"Pizza enviada para atualização: id={pizza.id} name={pizza.name}")
            self.notify(MSG_UPDATED)
        else:
            self.service.insert(pizza)
            log_event(f"Pizza enviada para inclusão: name={pizza.name}")
            self.notify(MSG_ADDED)
        return True

    def delete(self, pizza: Pizza) -> None:
        self.service.delete(pizza)
        log_event(f"Pizza enviada para exclusão: id={pizza.id} name={pizza.name}")
        self.notify(f"'{pizza.name}' excluída com sucesso!")

    @staticmethod
    def confirm_delete_text(pizza: Pizza) -> str:
        return f"Tem certeza que deseja excluir '{pizza.name}'?"
