from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from taxca.config import Settings, get_settings
from taxca.core.tax_years import SUPPORTED_YEARS

Hook = Callable[[FastAPI], Awaitable[None] | None]


def _open_log_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    if settings.log_dir is None:
        return None
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(settings.log_level_value)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logging.getLogger("taxca").addHandler(handler)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    result = hook(app)
    if inspect.isawaitable(result):
        await result


def build_application_lifespan(
    app_label: str,
    *,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("taxca")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        base_logger.setLevel(settings.log_level_value)
        logger = base_logger.getChild(app_label)
        log_handler = _open_log_sink(logger, settings, app_label)

        app.state.settings = settings
        app.state.supported_years = SUPPORTED_YEARS
        app.state.log_handler = log_handler
        app.state.app_label = app_label

        logger.info(
            "Startup complete: default_tax_year=%s supported_years=%s",
            settings.default_tax_year,
            ",".join(str(year) for year in SUPPORTED_YEARS),
        )

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            logger.info("Shutdown complete")
            if log_handler is not None:
                base_logger.removeHandler(log_handler)
                log_handler.close()
            for attr in ("settings", "supported_years", "log_handler", "app_label"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)

    return _lifespan
