import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from taxca.config import get_settings
from taxca.lifespan import build_application_lifespan


def test_lifespan_populates_state_and_runs_hooks():
    calls = []

    async def on_start(app: FastAPI) -> None:
        calls.append(("start", app.state.settings.default_tax_year))

    def on_stop(_: FastAPI) -> None:
        calls.append(("stop", None))

    get_settings.cache_clear()
    app = FastAPI(lifespan=build_application_lifespan("test", startup_hook=on_start, shutdown_hook=on_stop))
    with TestClient(app):
        assert app.state.supported_years == (2024, 2025)
        assert app.state.log_handler is None
    assert calls == [("start", 2025), ("stop", None)]
    assert not hasattr(app.state, "settings")


def test_lifespan_writes_log_file(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    app = FastAPI(lifespan=build_application_lifespan("filelog"))
    with TestClient(app):
        handler = app.state.log_handler
        assert isinstance(handler, logging.FileHandler)
        logging.getLogger("taxca").getChild("filelog").warning("hello from test")
    assert handler not in logging.getLogger("taxca").handlers
    contents = (tmp_path / "logs" / "filelog.log").read_text(encoding="utf-8")
    assert "hello from test" in contents
    assert "Startup complete" in contents
    get_settings.cache_clear()


def test_lowercase_log_level_starts_app(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("LOG_DIR", raising=False)
    get_settings.cache_clear()
    app = FastAPI(lifespan=build_application_lifespan("levels"))
    with TestClient(app):
        assert app.state.settings.log_level == "DEBUG"
        assert logging.getLogger("taxca").level == logging.DEBUG
    logging.getLogger("taxca").setLevel(logging.NOTSET)
    get_settings.cache_clear()
