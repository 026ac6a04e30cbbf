# errors.py
# Exceções da aplicação (validação, parsing e armazenamento)


class ValidationError(ValueError):
    """Valor rejeitado por uma regra do cardápio (preço, tamanho, status, campo obrigatório)."""


class ParseError(ValueError):
    """Texto do formulário que não pôde ser convertido em número."""


class StorageError(Exception):
    """Falha do banco SQLite subjacente."""


class SchemaMigrationError(StorageError):
    """Versão do esquema gravado difere da esperada e a recriação destrutiva está desligada."""

    def __init__(self, found: int, expected: int):
        super().__init__(f"Schema version {found} found, expected {expected}")
        self.found = found
        self.expected = expected


class WorkerClosedError(RuntimeError):
    """Tarefa enviada a um worker que já foi encerrado."""
