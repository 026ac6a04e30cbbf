# database.py
# Responsável pela conexão e operações com o banco de dados SQLite

import sqlite3
import os
import threading
from typing import Any, ClassVar, List, Mapping, Optional, Tuple, Union

from pizzeria.core.errors import SchemaMigrationError, StorageError
from pizzeria.core.logger import log_debug, log_event, log_warning

# Parameter type accepted by sqlite3 (positional tuple or named mapping)
Params = Union[Tuple[Any, ...], Mapping[str, Any]]

# Versão do esquema gravada em PRAGMA user_version
SCHEMA_VERSION = 1

PIZZAS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS pizzas (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        ingredients TEXT NOT NULL,
        price REAL,
        size INTEGER,
        description TEXT,
        status TEXT NOT NULL DEFAULT 'available'
    )
"""


class Database:
    """
    Conexão única com o arquivo SQLite do cardápio.

    Use Database.get_instance() para obter o handle do processo; o construtor
    direto existe para testes e ferramentas que precisam de um banco isolado.
    """

    _instance: ClassVar[Optional["Database"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, db_path: str, destructive_migration: bool = True):
        self.db_path = db_path
        self.destructive_migration = destructive_migration
        # A mesma conexão é usada pela thread da interface e pelo worker
        self._lock = threading.RLock()
        if db_path != ":memory:":
            directory = os.path.dirname(os.path.abspath(db_path))
            os.makedirs(directory, exist_ok=True)
        try:
            self.conn = sqlite3.connect(self.db_path, timeout=10, check_same_thread=False)
        except sqlite3.Error as e:
            raise StorageError(f"Não foi possível abrir o banco {db_path}: {e}") from e
        self.conn.row_factory = sqlite3.Row
        try:
            c = self.conn.cursor()
            c.execute("PRAGMA foreign_keys=ON")
            c.execute("PRAGMA journal_mode=WAL")  # leitores não bloqueiam escritor
            c.execute("PRAGMA synchronous=NORMAL")
            c.execute("PRAGMA busy_timeout=5000")  # 5s de espera em lock
            self.conn.commit()
        except sqlite3.DatabaseError as e:
            log_warning(f"PRAGMAs não aplicados em {db_path}: {e}")
        self.closed = False
        try:
            self._init_db()
        except sqlite3.Error as e:
            self.close()
            raise StorageError(f"Erro ao preparar o banco {db_path}: {e}") from e
        except StorageError:
            self.close()
            raise

    @classmethod
    def get_instance(cls, db_path: str, destructive_migration: bool = True) -> "Database":
        """
        Retorna o handle único do processo, criando-o na primeira chamada.
        Chamadas seguintes ignoram os argumentos e devolvem o mesmo objeto.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(db_path, destructive_migration)
                    log_event(f"Banco de dados aberto: {db_path}")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Fecha e descarta o handle único (troca de arquivo ou testes)."""
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.close()
                cls._instance = None

    def _init_db(self):
        with self._lock:
            version = self.schema_version()
            has_table = self.table_exists("pizzas")
            if version == SCHEMA_VERSION and has_table:
                return
            if version == 0 and not has_table:
                self._create_schema()
                return
            if version > SCHEMA_VERSION or not self.destructive_migration:
                raise SchemaMigrationError(version, SCHEMA_VERSION)
            log_warning(
                f"Esquema v{version} encontrado (esperado v{SCHEMA_VERSION}); "
                f"recriando a tabela 'pizzas', dados anteriores serão perdidos"
            )
            try:
                self.conn.execute("DROP TABLE IF EXISTS pizzas")
                self.conn.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Erro ao recriar esquema: {e}") from e
            self._create_schema()

    def _create_schema(self):
        try:
            cur = self.conn.cursor()
            cur.execute(PIZZAS_TABLE_SQL)
            cur.execute(f"PRAGMA user_version = {int(SCHEMA_VERSION)}")
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Erro ao criar esquema: {e}") from e
        log_debug(f"Esquema v{SCHEMA_VERSION} criado em {self.db_path}")

    def schema_version(self) -> int:
        row = self.conn.execute("PRAGMA user_version").fetchone()
        return int(row[0]) if row else 0

    def table_exists(self, name: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (name,)
        ).fetchone()
        return row is not None

    def execute(self, sql: str, params: Params = ()) -> sqlite3.Cursor:
        with self._lock:
            self._ensure_open()
            try:
                cur = self.conn.cursor()
                cur.execute(sql, params)
                self.conn.commit()
            except sqlite3.Error as e:
                self.conn.rollback()
                raise StorageError(f"Erro ao executar '{sql.strip()}': {e}") from e
            return cur

    def query(self, sql: str, params: Params = ()) -> List[sqlite3.Row]:
        with self._lock:
            self._ensure_open()
            try:
                cur = self.conn.cursor()
                cur.execute(sql, params)
                return cur.fetchall()
            except sqlite3.Error as e:
                if "malformed" in str(e).lower() or "corrupt" in str(e).lower():
                    raise StorageError(f"Banco de dados corrompido: {e}") from e
                raise StorageError(f"Erro na consulta '{sql.strip()}': {e}") from e

    def _ensure_open(self) -> None:
        if self.closed:
            raise StorageError(f"Banco de dados fechado: {self.db_path}")

    def close(self) -> None:
        with self._lock:
            self.closed = True
            self.conn.close()
