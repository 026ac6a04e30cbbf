# -*- coding: utf-8 -*-
# Pizzaria – Cardápio (PyQt6 + SQLite)
# -----------------------------------------------------
# Requisitos:
#   pip install -e .
#
# Observações:
# - Tela única: lista do cardápio, inclusão/edição por diálogo e exclusão
#   pelo menu de contexto (botão direito) com confirmação.
# - Banco de dados SQLite local: ~/.pizzeria/pizzeria.db (configurável em
#   ~/.pizzeria/config.yaml, chave database_path).
# - Gravações rodam numa thread de fundo; a lista se atualiza sozinha.
#
# Como executar:
#   python Pizzeria.py

from pizzeria.app import main

if __name__ == "__main__":
    main()
