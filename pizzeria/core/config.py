# config.py
# Configurações globais e leitura de YAML

from typing import Dict, Any, Optional
import yaml
import os
import sys


def get_app_data_directory() -> str:
    """
    Retorna o diretório de dados da aplicação.
    No Windows usa %LOCALAPPDATA%\\Pizzeria, nos demais sistemas ~/.pizzeria.
    """
    if sys.platform == 'win32':
        base = os.getenv('LOCALAPPDATA', os.getenv('APPDATA', ''))
        if base:
            app_data_dir = os.path.join(base, 'Pizzeria')
        else:
            app_data_dir = os.path.join(os.path.expanduser("~"), "AppData", "Local", "Pizzeria")
    else:
        app_data_dir = os.path.expanduser('~/.pizzeria')

    os.makedirs(app_data_dir, exist_ok=True)
    return app_data_dir


def get_config_path() -> str:
    return os.path.join(get_app_data_directory(), 'config.yaml')


DEFAULTS: Dict[str, Any] = {
    # None = <diretório de dados>/pizzeria.db
    'database_path': None,
    # Versão de esquema diferente apaga e recria a tabela (perde os dados)
    'destructive_migration': True,
    'worker_queue_size': 64,
    'theme': 'light',
    'log_level': 'INFO',
}

# QSS para popups escuros
QSS_POPUP_DARK = """
QDialog, QMessageBox {
    background: #23272e;
    color: #f3f4f6;
}
QLabel, QDialog QLabel, QMessageBox QLabel {
    color: #f3f4f6;
    background: transparent;
}
QLineEdit, QTextEdit, QPlainTextEdit, QComboBox {
    color: #f3f4f6;
    background: #23272e;
    border: 1px solid #444;
}
QComboBox QAbstractItemView {
    background: #23272e;
    color: #f3f4f6;
    selection-background-color: #3b4252;
    selection-color: #f3f4f6;
}
QPushButton {
    background: #2d323b;
    color: #f3f4f6;
    border: 1px solid #444;
    border-radius: 4px;
    padding: 4px 12px;
}
QPushButton:hover {
    background: #3b4252;
}
QPushButton:pressed {
    background: #22262c;
}
"""

# QSS para popups claros (tema light)
QSS_POPUP_LIGHT = """
QDialog, QMessageBox {
    background: #ffffff;
    color: #1f2937;
}
QLabel, QDialog QLabel, QMessageBox QLabel {
    color: #1f2937;
    background: transparent;
}
QLineEdit, QTextEdit, QPlainTextEdit, QComboBox {
    color: #111827;
    background: #ffffff;
    border: 1px solid #d1d5db;
    border-radius: 8px;
    padding: 6px;
    selection-background-color: #e8eefc;
    selection-color: #1b2240;
}
QComboBox QAbstractItemView {
    background: #ffffff;
    color: #111827;
    selection-background-color: #e8eefc;
}
QPushButton {
    background: #e5e7eb;
    color: #111827;
    padding: 8px 14px;
    border: 1px solid #d1d5db;
    border-radius: 10px;
}
QPushButton:hover {
    background: #dbeafe;
}
QPushButton:pressed {
    background: #c7d2fe;
}
"""


def popup_qss(theme: Optional[str] = None) -> str:
    """QSS de diálogos para o tema informado (ou o tema salvo)."""
    if theme is None:
        theme = get_settings().get('theme', 'light')
    return QSS_POPUP_DARK if theme == 'dark' else QSS_POPUP_LIGHT


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Carrega as configurações do arquivo YAML.

    Args:
        path: Arquivo alternativo; por padrão config.yaml no diretório de dados

    Returns:
        Dict[str, Any]: Dicionário com as configurações (vazio se o arquivo não existir)
    """
    path = path or get_config_path()
    if not os.path.exists(path):
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def save_config(data: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Salva as configurações no arquivo YAML.

    Args:
        data: Dicionário com as configurações para salvar
        path: Arquivo alternativo; por padrão config.yaml no diretório de dados
    """
    path = path or get_config_path()
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(data, f, allow_unicode=True)


def get_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Configurações efetivas: valores padrão sobrepostos pelo arquivo."""
    if config is None:
        config = load_config()
    settings = dict(DEFAULTS)
    settings.update({k: v for k, v in config.items() if v is not None})
    settings['database_path'] = get_database_path(settings)
    return settings


def get_database_path(config: Optional[Dict[str, Any]] = None) -> str:
    """
    Retorna o caminho absoluto do banco de dados.

    Usa 'database_path' da configuração quando definido; senão
    <diretório de dados>/pizzeria.db (o arquivo é criado na primeira conexão).
    """
    if config is None:
        config = load_config()
    db_path = config.get('database_path')
    if db_path:
        return os.path.abspath(os.path.expanduser(str(db_path)))
    return os.path.join(get_app_data_directory(), 'pizzeria.db')
