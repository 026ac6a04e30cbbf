import pytest

from pizzeria.core.dao import PizzaDao
from pizzeria.core.database import Database
from pizzeria.core.models import Pizza
from pizzeria.core.services import PizzaService


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config, logs and the default database out of the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    yield home
    Database.reset_instance()


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "pizzeria.db")


@pytest.fixture
def db(db_path):
    database = Database(db_path)
    yield database
    database.close()


@pytest.fixture
def dao(db):
    return PizzaDao(db)


@pytest.fixture
def service(dao):
    svc = PizzaService(dao)
    yield svc
    svc.close()


@pytest.fixture
def make_pizza():
    def _make(**overrides):
        values = dict(
            name="Margherita",
            ingredients="tomato, mozzarella",
            price=150.0,
            size=30,
            description="",
            status="available",
        )
        values.update(overrides)
        return Pizza(**values)
    return _make
