# observable.py
# Valor observável (publish/subscribe) usado para manter a lista exibida em dia

import threading
from typing import Callable, Generic, List, Optional, TypeVar

from pizzeria.core.logger import log_error

T = TypeVar("T")

Observer = Callable[[T], None]


class LiveData(Generic[T]):
    """
    Guarda o último valor publicado e o entrega a cada observador.

    Quem se inscreve recebe imediatamente o valor atual (se houver) e depois
    cada novo valor, na thread que publicou. Para entregar na thread da
    interface, o observador deve repassar o valor via sinal Qt.
    """

    def __init__(self, value: Optional[T] = None):
        self._value = value
        self._has_value = value is not None
        self._observers: List[Observer] = []
        self._lock = threading.Lock()

    @property
    def value(self) -> Optional[T]:
        with self._lock:
            return self._value

    def observe(self, observer: Observer) -> Callable[[], None]:
        """Inscreve o observador e retorna uma função que cancela a inscrição."""
        with self._lock:
            self._observers.append(observer)
            has_value, current = self._has_value, self._value
        if has_value:
            self._deliver(observer, current)
        return lambda: self.remove_observer(observer)

    def remove_observer(self, observer: Observer) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def has_observers(self) -> bool:
        with self._lock:
            return bool(self._observers)

    def post(self, value: T) -> None:
        with self._lock:
            self._value = value
            self._has_value = True
            observers = list(self._observers)
        for observer in observers:
            self._deliver(observer, value)

    def _deliver(self, observer: Observer, value: T) -> None:
        # Um observador com defeito não impede a entrega aos demais
        try:
            observer(value)
        except Exception as e:
            log_error(f"Erro no observador {observer!r}", e)
