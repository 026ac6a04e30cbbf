"""Tests for YAML configuration, logging setup and the application context."""

import logging
import os

from pizzeria.core import logger as app_logger
from pizzeria.core.config import (
    DEFAULTS,
    QSS_POPUP_DARK,
    QSS_POPUP_LIGHT,
    get_database_path,
    get_settings,
    load_config,
    popup_qss,
    save_config,
)
from pizzeria.core.context import AppContext
from pizzeria.core.database import Database


class TestConfig:
    def test_missing_file_is_empty_config(self, tmp_path):
        assert load_config(str(tmp_path / "missing.yaml")) == {}

    def test_save_and_load_round_trip(self, tmp_path):
        path = str(tmp_path / "cfg" / "config.yaml")
        data = {"theme": "dark", "worker_queue_size": 8, "database_path": "/tmp/menu.db"}

        save_config(data, path)

        assert load_config(path) == data

    def test_default_config_file_lives_in_data_dir(self, isolated_home):
        save_config({"theme": "dark"})

        assert os.path.isfile(isolated_home / ".pizzeria" / "config.yaml")
        assert load_config() == {"theme": "dark"}

    def test_settings_defaults(self, isolated_home):
        settings = get_settings({})

        assert settings["destructive_migration"] is True
        assert settings["worker_queue_size"] == DEFAULTS["worker_queue_size"]
        assert settings["database_path"] == str(isolated_home / ".pizzeria" / "pizzeria.db")

    def test_settings_override_defaults(self, tmp_path):
        settings = get_settings({"destructive_migration": False, "database_path": str(tmp_path / "x.db")})

        assert settings["destructive_migration"] is False
        assert settings["database_path"] == str(tmp_path / "x.db")
        assert settings["theme"] == "light"

    def test_database_path_expands_user(self, isolated_home):
        assert get_database_path({"database_path": "~/menus/pizza.db"}) == str(isolated_home / "menus" / "pizza.db")

    def test_popup_qss_follows_theme(self):
        assert popup_qss("dark") == QSS_POPUP_DARK
        assert popup_qss("light") == QSS_POPUP_LIGHT


class TestLogging:
    def test_setup_logging_writes_daily_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(app_logger, "_configured", False)
        before = list(app_logger.logger.handlers)
        try:
            path = app_logger.setup_logging("DEBUG", str(tmp_path / "logs"))
            app_logger.log_event("hello")
            for handler in app_logger.logger.handlers:
                handler.flush()

            assert os.path.basename(path).startswith("pizzeria_")
            with open(path, encoding="utf-8") as f:
                assert "[INFO] hello" in f.read()
            assert app_logger.logger.level == logging.DEBUG
        finally:
            for handler in list(app_logger.logger.handlers):
                if handler not in before:
                    app_logger.logger.removeHandler(handler)
                    handler.close()


class TestAppContext:
    def test_create_uses_process_wide_store(self, tmp_path):
        db_path = str(tmp_path / "ctx.db")

        ctx = AppContext.create({"database_path": db_path}, configure_logging=False)
        try:
            assert ctx.db is Database.get_instance(db_path)
            assert ctx.db.db_path == db_path
            assert ctx.dao.db is ctx.db
        finally:
            ctx.close()

    def test_service_from_context_persists(self, tmp_path, make_pizza):
        ctx = AppContext.create({"database_path": str(tmp_path / "ctx.db"), "worker_queue_size": 4},
                                configure_logging=False)
        service = ctx.create_service()
        try:
            service.insert(make_pizza()).result(timeout=5)
            assert [p.name for p in service.get_all_pizzas().value] == ["Margherita"]
        finally:
            service.close()
            ctx.close()
