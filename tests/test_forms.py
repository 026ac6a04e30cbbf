"""Tests for form parsing and the controller that turns form events into service calls."""

from unittest.mock import MagicMock

import pytest

from pizzeria.core.errors import ParseError, ValidationError
from pizzeria.core.forms import (
    MSG_ADDED,
    MSG_BAD_NUMBER,
    MSG_REQUIRED,
    MSG_UPDATED,
    PizzaController,
    PizzaForm,
    parse_pizza_form,
)


def _form(**overrides):
    values = dict(
        name="Margherita",
        ingredients="tomato, mozzarella",
        price="150",
        size="30",
        description="",
        status="available",
    )
    values.update(overrides)
    return PizzaForm(**values)


class TestParsePizzaForm:
    def test_new_pizza_has_no_id(self):
        pizza = parse_pizza_form(_form(existing_id=5))

        assert pizza.id is None
        assert pizza.price == 150.0
        assert pizza.size == 30

    def test_editing_keeps_existing_id(self):
        pizza = parse_pizza_form(_form(is_editing=True, existing_id=5, status="out_of_stock"))

        assert pizza.id == 5
        assert pizza.status == "out_of_stock"

    def test_text_is_stripped(self):
        pizza = parse_pizza_form(_form(name="  Margherita ", price=" 99.90 ", size=" 25", description="  x "))

        assert pizza.name == "Margherita"
        assert pizza.price == 99.9
        assert pizza.size == 25
        assert pizza.description == "x"

    @pytest.mark.parametrize("field", ["name", "ingredients", "price", "size"])
    def test_blank_required_field(self, field):
        with pytest.raises(ValidationError, match=MSG_REQUIRED):
            parse_pizza_form(_form(**{field: "   "}))

    def test_description_is_optional(self):
        assert parse_pizza_form(_form(description="")).description == ""

    @pytest.mark.parametrize("price,size", [("abc", "30"), ("150", "big"), ("150", "30.5")])
    def test_non_numeric_input(self, price, size):
        with pytest.raises(ParseError):
            parse_pizza_form(_form(price=price, size=size))

    def test_zero_price_is_validation_error(self):
        with pytest.raises(ValidationError):
            parse_pizza_form(_form(price="0"))

    def test_negative_size_is_validation_error(self):
        with pytest.raises(ValidationError):
            parse_pizza_form(_form(size="-5"))

    def test_from_pizza_prefills_for_edit(self, make_pizza):
        pizza = make_pizza(id=3, description=None)

        form = PizzaForm.from_pizza(pizza)

        assert form.is_editing and form.existing_id == 3
        assert form.description == ""
        assert parse_pizza_form(form) == make_pizza(id=3, description="")


class TestPizzaController:
    @pytest.fixture
    def messages(self):
        return []

    @pytest.fixture
    def fake_service(self):
        return MagicMock()

    @pytest.fixture
    def controller(self, fake_service, messages):
        return PizzaController(fake_service, messages.append)

    def test_submit_new_pizza_inserts(self, controller, fake_service, messages):
        assert controller.submit(_form()) is True

        fake_service.insert.assert_called_once()
        fake_service.update.assert_not_called()
        assert fake_service.insert.call_args.args[0].name == "Margherita"
        assert messages == [MSG_ADDED]

    def test_submit_edit_updates(self, controller, fake_service, messages):
        assert controller.submit(_form(is_editing=True, existing_id=9)) is True

        fake_service.update.assert_called_once()
        assert fake_service.update.call_args.args[0].id == 9
        assert messages == [MSG_UPDATED]

    def test_blank_field_message(self, controller, fake_service, messages):
        assert controller.submit(_form(name="")) is False

        fake_service.insert.assert_not_called()
        assert messages == [MSG_REQUIRED]

    def test_parse_error_message(self, controller, fake_service, messages):
        assert controller.submit(_form(price="cheap")) is False

        fake_service.insert.assert_not_called()
        assert messages == [MSG_BAD_NUMBER]

    def test_validation_error_message(self, controller, fake_service, messages):
        assert controller.submit(_form(price="-3")) is False

        fake_service.insert.assert_not_called()
        assert len(messages) == 1
        assert messages[0].startswith("Erro de entrada: ")

    def test_invalid_status_is_rejected(self, controller, fake_service, messages):
        assert controller.submit(_form(status="sold_out")) is False
        fake_service.insert.assert_not_called()

    def test_delete_enqueues_and_notifies(self, controller, fake_service, messages, make_pizza):
        pizza = make_pizza(id=4)

        controller.delete(pizza)

        fake_service.delete.assert_called_once_with(pizza)
        assert messages == ["'Margherita' excluída com sucesso!"]

    def test_confirm_delete_text(self, make_pizza):
        assert PizzaController.confirm_delete_text(make_pizza()) == "Tem certeza que deseja excluir 'Margherita'?"


class TestControllerWithRealService:
    def test_submitted_pizza_reaches_the_store(self, service, dao):
        messages = []
        controller = PizzaController(service, messages.append)

        controller.submit(_form())
        service.close()

        assert [p.name for p in dao.get_all()] == ["Margherita"]
        assert messages == [MSG_ADDED]
