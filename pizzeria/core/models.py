# models.py
# Definição da entidade Pizza e das regras de validação dos campos

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Optional, Tuple
import math
import sqlite3

from pizzeria.core.errors import ValidationError

STATUS_AVAILABLE = "available"
STATUS_PREPARING = "preparing"
STATUS_OUT_OF_STOCK = "out_of_stock"

# Ordem usada também no combo do formulário
STATUSES: Tuple[str, ...] = (STATUS_AVAILABLE, STATUS_PREPARING, STATUS_OUT_OF_STOCK)

STATUS_LABELS: Dict[str, str] = {
    STATUS_AVAILABLE: "Disponível",
    STATUS_PREPARING: "Preparando",
    STATUS_OUT_OF_STOCK: "Em falta",
}


def _is_number(value: Any) -> bool:
    # bool é subclasse de int, mas True/False não são preço nem tamanho
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_required_text(field: str) -> Callable[[Any], None]:
    def check(value: Any) -> None:
        if value is None or not isinstance(value, str):
            raise ValidationError(f"O campo '{field}' é obrigatório")
    return check


def _check_price(value: Any) -> None:
    if not _is_number(value):
        raise ValidationError("O preço deve ser numérico")
    if not math.isfinite(value):
        raise ValidationError("O preço deve ser um número finito")
    if value <= 0:
        raise ValidationError("O preço deve ser maior que zero")


def _check_size(value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError("O tamanho deve ser um número inteiro")
    if value <= 0:
        raise ValidationError("O tamanho deve ser maior que zero!")


def _check_status(value: Any) -> None:
    if value not in STATUSES:
        allowed = ", ".join(f"'{s}'" for s in STATUSES)
        raise ValidationError(f"Status inválido! Permitidos: {allowed}.")


def _check_description(value: Any) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError("A descrição deve ser texto")


def _check_id(value: Any) -> None:
    if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
        raise ValidationError("O id deve ser inteiro")


_VALIDATORS: Dict[str, Callable[[Any], None]] = {
    "name": _check_required_text("name"),
    "ingredients": _check_required_text("ingredients"),
    "price": _check_price,
    "size": _check_size,
    "description": _check_description,
    "status": _check_status,
    "id": _check_id,
}


@dataclass
class Pizza:
    """
    Uma pizza do cardápio.

    Todas as regras são verificadas tanto na construção quanto em cada
    atribuição: uma atribuição inválida levanta ValidationError e mantém o
    valor anterior. Nome e ingredientes vazios ("") são aceitos aqui; quem
    barra texto vazio é o formulário (ver forms.parse_pizza_form).
    """
    name: str
    ingredients: str
    price: float
    size: int
    description: Optional[str] = None
    status: str = STATUS_AVAILABLE
    id: Optional[int] = None

    def __setattr__(self, key: str, value: Any) -> None:
        validator = _VALIDATORS.get(key)
        if validator is not None:
            validator(value)
        if key == "price":
            value = float(value)
        super().__setattr__(key, value)

    @property
    def status_label(self) -> str:
        return STATUS_LABELS[self.status]

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Pizza":
        return cls(
            id=row["id"],
            name=row["name"],
            ingredients=row["ingredients"],
            price=row["price"],
            size=row["size"],
            description=row["description"],
            status=row["status"],
        )

    def to_params(self) -> Tuple[Any, ...]:
        """Valores das colunas na ordem (name, ingredients, price, size, description, status)."""
        return (self.name, self.ingredients, self.price, self.size, self.description, self.status)

    def copy(self) -> "Pizza":
        return Pizza(**{f.name: getattr(self, f.name) for f in fields(self)})
