# logger.py
# Logger da aplicação

import logging
import os
import sys
from datetime import datetime
from typing import Optional

from pizzeria.core.config import get_app_data_directory

logger = logging.getLogger("pizzeria")

FORMAT = '%(asctime)s [%(levelname)s] %(message)s'

_configured = False


def get_log_dir() -> str:
    """Retorna o diretório de logs dentro do diretório de dados"""
    log_dir = os.path.join(get_app_data_directory(), 'logs')
    os.makedirs(log_dir, exist_ok=True)
    return log_dir


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> str:
    """
    Configura arquivo de log diário + saída no console.
    Chamadas repetidas não duplicam handlers.

    Returns:
        str: Caminho do arquivo de log
    """
    global _configured
    log_dir = log_dir or get_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f'pizzeria_{datetime.now().strftime("%Y%m%d")}.log')
    if _configured:
        return log_path

    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(FORMAT, '%Y-%m-%d %H:%M:%S'))
    logger.addHandler(file_handler)

    # Adiciona também saída no console para debug
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(FORMAT, '%H:%M:%S'))
    logger.addHandler(console_handler)

    _configured = True
    return log_path


def log_event(msg: str):
    """Registra evento informativo"""
    logger.info(msg)


def log_error(msg: str, exc: Optional[BaseException] = None):
    """Registra erro com traceback opcional"""
    if exc:
        logger.error(f"{msg}: {str(exc)}", exc_info=exc)
    else:
        logger.error(msg)


def log_warning(msg: str):
    """Registra aviso"""
    logger.warning(msg)


def log_debug(msg: str):
    """Registra mensagem de debug"""
    logger.debug(msg)


def log_startup(db_path: str):
    """Registra informações de inicialização do sistema"""
    logger.info("=" * 60)
    logger.info("PIZZARIA - SISTEMA INICIADO")
    logger.info("=" * 60)
    logger.info(f"Versão Python: {sys.version}")
    logger.info(f"Sistema Operacional: {sys.platform}")
    logger.info(f"Banco de dados: {db_path}")
    logger.info("=" * 60)
