"""Tests for PizzaService: queued mutations and the live list pass-through."""

import threading

import pytest

from pizzeria.core.dao import PizzaDao
from pizzeria.core.errors import StorageError, WorkerClosedError
from pizzeria.core.services import PizzaService


class TestPizzaService:
    def test_get_all_pizzas_is_the_dao_live_list(self, service, dao):
        assert service.get_all_pizzas() is dao.list_all()

    def test_insert_returns_future_with_new_id(self, service, dao, make_pizza):
        future = service.insert(make_pizza())

        new_id = future.result(timeout=5)

        assert dao.get_by_id(new_id).name == "Margherita"

    def test_mutations_run_off_the_calling_thread(self, service, dao, make_pizza, monkeypatch):
        threads = []
        original = dao.insert

        def spy(pizza):
            threads.append(threading.current_thread())
            return original(pizza)

        monkeypatch.setattr(dao, "insert", spy)
        service.insert(make_pizza()).result(timeout=5)

        assert threads and threads[0] is not threading.current_thread()

    def test_rapid_mutations_apply_in_submission_order(self, service, dao, make_pizza):
        pizza = make_pizza()
        service.insert(pizza).result(timeout=5)

        futures = []
        for counter in range(1, 51):
            step = pizza.copy()
            step.size = counter
            futures.append(service.update(step))
        for f in futures:
            f.result(timeout=5)

        assert dao.get_by_id(pizza.id).size == 50

    def test_rapid_inserts_keep_order(self, service, dao, make_pizza):
        for i in range(30):
            service.insert(make_pizza(name=f"pizza-{i}"))
        service.close()

        names = [p.name for p in dao.list_all().value]

        assert names == [f"pizza-{i}" for i in reversed(range(30))]

    def test_update_to_preparing_scenario(self, service, dao, make_pizza):
        new_id = service.insert(make_pizza()).result(timeout=5)
        pizza = dao.get_by_id(new_id)
        pizza.status = "preparing"

        service.update(pizza).result(timeout=5)

        stored = dao.get_by_id(new_id)
        assert stored.status == "preparing"
        assert (stored.name, stored.price, stored.size) == ("Margherita", 150.0, 30)

    def test_delete_of_unknown_pizza_is_silent(self, service, dao, make_pizza):
        service.insert(make_pizza()).result(timeout=5)

        assert service.delete(make_pizza(id=999)).result(timeout=5) == 0
        assert len(dao.list_all().value) == 1

    def test_observers_see_worker_updates(self, service, make_pizza):
        seen = []
        service.get_all_pizzas().observe(lambda pizzas: seen.append([p.name for p in pizzas]))

        service.insert(make_pizza(name="A")).result(timeout=5)
        service.insert(make_pizza(name="B")).result(timeout=5)

        assert seen == [[], ["A"], ["B", "A"]]

    def test_storage_failure_stays_on_future(self, db, make_pizza):
        svc = PizzaService(PizzaDao(db))
        db.close()

        future = svc.insert(make_pizza())

        assert isinstance(future.exception(timeout=5), StorageError)
        svc.close()

    def test_close_waits_for_pending_and_rejects_new_work(self, dao, make_pizza):
        svc = PizzaService(dao)
        for i in range(10):
            svc.insert(make_pizza(name=f"p{i}"))
        svc.close()

        assert len(dao.get_all()) == 10
        late = svc.insert(make_pizza(name="late"))
        with pytest.raises(WorkerClosedError):
            late.result(timeout=1)
        assert len(dao.get_all()) == 10
