import logging

from infra.logging_config import setup_logging
from infra.path import database_url, default_db_path
from infra.version import get_app_version


def test_database_url_honours_env_override(monkeypatch):
    monkeypatch.setenv("SITELEDGER_DB_URL", "sqlite:///custom.db")
    assert database_url() == "sqlite:///custom.db"


def test_database_url_defaults_to_user_data_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("SITELEDGER_DB_URL", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))

    assert default_db_path().name == "siteledger.db"
    assert database_url().endswith("siteledger.db")


def test_app_version_override(monkeypatch):
    monkeypatch.setenv("SITELEDGER_APP_VERSION", "9.9.9")
    assert get_app_version() == "9.9.9"


def test_setup_logging_writes_to_log_dir(tmp_path):
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path)
        logging.getLogger("siteledger.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert log_file.parent == tmp_path
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
