# Pizzaria – gerenciador de cardápio (PyQt6 + SQLite)

__version__ = "1.0.0"
