# app.py
# Inicialização da aplicação: configuração, banco e janela principal

import sys

from PyQt6.QtWidgets import QApplication

from pizzeria.core.context import AppContext
from pizzeria.core.errors import StorageError
from pizzeria.core.logger import log_error, log_event
from pizzeria.ui.dialogs.custom_messagebox import CustomMessageBox
from pizzeria.ui.main_window import MainWindow


def main() -> None:
    app = QApplication(sys.argv)
    app.setApplicationName("Pizzaria")

    try:
        ctx = AppContext.create()
    except StorageError as e:
        log_error("ERRO FATAL: não foi possível abrir o banco de dados", e)
        CustomMessageBox.show_message(None, "Erro", f"Não foi possível abrir o banco de dados.\n\n{e}", ("OK",))
        sys.exit(1)

    win = MainWindow(ctx)
    win.show()
    code = app.exec()
    ctx.close()
    log_event("Aplicação encerrada")
    sys.exit(code)


if __name__ == "__main__":
    main()
