# dao.py
# Acesso à tabela 'pizzas' (listagem, inclusão, alteração, exclusão e busca por id)

from typing import List, Optional

from pizzeria.core.database import Database
from pizzeria.core.logger import log_debug
from pizzeria.core.models import Pizza
from pizzeria.core.observable import LiveData


class PizzaDao:
    """
    Traduz operações sobre Pizza em comandos SQL.

    Cada método roda em sua própria transação. Toda alteração feita por aqui
    republica a lista completa em list_all().
    """

    SELECT_ALL = "SELECT * FROM pizzas ORDER BY id DESC"

    def __init__(self, db: Database):
        self.db = db
        self._all: LiveData[List[Pizza]] = LiveData()
        self._loaded = False

    def list_all(self) -> LiveData[List[Pizza]]:
        """Lista viva com todas as pizzas, da mais recente para a mais antiga."""
        if not self._loaded:
            self.refresh()
        return self._all

    def refresh(self) -> List[Pizza]:
        """Consulta o banco de novo e publica o resultado."""
        pizzas = self.get_all()
        self._loaded = True
        self._all.post(pizzas)
        return pizzas

    def get_all(self) -> List[Pizza]:
        return [Pizza.from_row(r) for r in self.db.query(self.SELECT_ALL)]

    def insert(self, pizza: Pizza) -> int:
        cur = self.db.execute(
            "INSERT INTO pizzas(name, ingredients, price, size, description, status) VALUES (?,?,?,?,?,?)",
            pizza.to_params()
        )
        pizza.id = int(cur.lastrowid)
        log_debug(f"Pizza inserida: id={pizza.id} name={pizza.name}")
        self.refresh()
        return pizza.id

    def update(self, pizza: Pizza) -> int:
        """Sobrescreve a linha com pizza.id. Sem linha correspondente nada acontece."""
        if pizza.id is None:
            return 0
        cur = self.db.execute(
            "UPDATE pizzas SET name=?, ingredients=?, price=?, size=?, description=?, status=? WHERE id=?",
            pizza.to_params() + (pizza.id,)
        )
        log_debug(f"Pizza atualizada: id={pizza.id} linhas={cur.rowcount}")
        if cur.rowcount:
            self.refresh()
        return cur.rowcount

    def delete(self, pizza: Pizza) -> int:
        if pizza.id is None:
            return 0
        cur = self.db.execute("DELETE FROM pizzas WHERE id=?", (pizza.id,))
        log_debug(f"Pizza excluída: id={pizza.id} linhas={cur.rowcount}")
        if cur.rowcount:
            self.refresh()
        return cur.rowcount

    def get_by_id(self, pizza_id: int) -> Optional[Pizza]:
        rows = self.db.query("SELECT * FROM pizzas WHERE id = ? LIMIT 1", (pizza_id,))
        return Pizza.from_row(rows[0]) if rows else None
