# services.py
# Camada de serviços: intermedia a interface e o acesso ao banco

from concurrent.futures import Future
from typing import List

from pizzeria.core.dao import PizzaDao
from pizzeria.core.models import Pizza
from pizzeria.core.observable import LiveData
from pizzeria.core.worker import SerialWorker


class PizzaService:
    """
    Único ponto de alteração do cardápio usado pela interface.

    insert/update/delete entram na fila do worker e retornam na hora com um
    Future; a interface normalmente ignora o Future e acompanha o resultado
    pela lista de get_all_pizzas().
    """

    def __init__(self, dao: PizzaDao, queue_size: int = 64):
        self.dao = dao
        self._all_pizzas = dao.list_all()
        self._worker = SerialWorker("pizza-writer", maxsize=queue_size)

    def get_all_pizzas(self) -> LiveData[List[Pizza]]:
        return self._all_pizzas

    def insert(self, pizza: Pizza) -> Future:
        return self._worker.submit(self.dao.insert, pizza)

    def update(self, pizza: Pizza) -> Future:
        return self._worker.submit(self.dao.update, pizza)

    def delete(self, pizza: Pizza) -> Future:
        return self._worker.submit(self.dao.delete, pizza)

    def close(self) -> None:
        """Espera as operações pendentes e encerra o worker."""
        self._worker.shutdown(wait=True)
