# context.py
# Objetos compartilhados durante toda a execução (configuração, banco, DAO)

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pizzeria.core.config import get_settings
from pizzeria.core.dao import PizzaDao
from pizzeria.core.database import Database
from pizzeria.core.logger import log_startup, setup_logging
from pizzeria.core.services import PizzaService


@dataclass
class AppContext:
    """
    Criado uma vez na inicialização e passado adiante para quem precisa do
    banco, em vez de cada componente buscar o handle global por conta própria.
    """
    settings: Dict[str, Any]
    db: Database
    dao: PizzaDao

    @classmethod
    def create(cls, config: Optional[Dict[str, Any]] = None, configure_logging: bool = True) -> "AppContext":
        settings = get_settings(config)
        if configure_logging:
            setup_logging(settings["log_level"])
        log_startup(settings["database_path"])
        db = Database.get_instance(settings["database_path"], bool(settings["destructive_migration"]))
        return cls(settings=settings, db=db, dao=PizzaDao(db))

    def create_service(self) -> PizzaService:
        return PizzaService(self.dao, queue_size=int(self.settings["worker_queue_size"]))

    def close(self) -> None:
        Database.reset_instance()
