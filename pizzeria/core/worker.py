# worker.py
# Fila serial com uma única thread consumidora para gravações no banco

import queue
import threading
from concurrent.futures import Future
from typing import Any, Callable, Optional, Tuple

from pizzeria.core.errors import WorkerClosedError
from pizzeria.core.logger import log_debug, log_error, log_warning

_Task = Tuple[Future, Callable[..., Any], tuple, dict]

# Marca de fim de fila
_STOP = None


class SerialWorker:
    """
    Executa tarefas uma de cada vez, na ordem em que foram enviadas.

    submit() retorna um Future que o chamador pode ignorar. Exceções da
    tarefa ficam no Future (e no log); nunca sobem para quem enviou.
    """

    def __init__(self, name: str = "pizzeria-worker", maxsize: int = 64):
        self.name = name
        self._queue: "queue.Queue[Optional[_Task]]" = queue.Queue(maxsize=maxsize)
        self._closed = False
        self._close_lock = threading.Lock()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        future: Future = Future()
        with self._close_lock:
            if not self._closed:
                # Bloqueia apenas se a fila estiver cheia
                self._queue.put((future, fn, args, kwargs))
                return future
        log_warning(f"Tarefa {getattr(fn, '__name__', fn)!s} ignorada: worker '{self.name}' encerrado")
        future.set_exception(WorkerClosedError(f"Worker '{self.name}' já foi encerrado"))
        return future

    def shutdown(self, wait: bool = True) -> None:
        """Recusa novas tarefas; as que já estão na fila terminam normalmente."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_STOP)
        if wait and threading.current_thread() is not self._thread:
            self._thread.join()
        log_debug(f"Worker '{self.name}' encerrado")

    def _run(self) -> None:
        while True:
            task = self._queue.get()
            try:
                if task is _STOP:
                    return
                future, fn, args, kwargs = task
                if not future.set_running_or_notify_cancel():
                    continue
                try:
                    result = fn(*args, **kwargs)
                except BaseException as e:
                    log_error(f"Erro na tarefa {getattr(fn, '__name__', fn)!s}", e)
                    future.set_exception(e)
                else:
                    future.set_result(result)
            finally:
                self._queue.task_done()
