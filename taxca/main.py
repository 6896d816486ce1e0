import argparse
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taxca.api.http import router as api_router
from taxca.config import get_settings
from taxca.core.jurisdictions import UnknownJurisdictionError
from taxca.core.tax_years import SUPPORTED_YEARS, UnsupportedTaxYearError
from taxca.lifespan import build_application_lifespan

logger = logging.getLogger("taxca")


async def _announce_default_tax_year(_: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "Tax calculator ready; default_tax_year=%s version=%s sha=%s",
        settings.default_tax_year,
        settings.build_version,
        settings.build_sha,
    )


app = FastAPI(
    title="Canadian Tax Calculator",
    description="Federal and provincial income tax, payroll contributions and investment income.",
    version="0.1.0",
    lifespan=build_application_lifespan("api", startup_hook=_announce_default_tax_year),
)
app.include_router(api_router)


def _error(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, "code": code},
    )


def _describe(errors) -> str:
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item not in ("body", "path", "query")]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(parts)


@app.exception_handler(RequestValidationError)
async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, f"Validation failed: {_describe(exc.errors())}", "VALIDATION_ERROR")


@app.exception_handler(UnsupportedTaxYearError)
async def _unsupported_year(_: Request, exc: UnsupportedTaxYearError) -> JSONResponse:
    return _error(404, str(exc.args[0]) if exc.args else "Unsupported tax year", "NOT_FOUND")


@app.exception_handler(UnknownJurisdictionError)
async def _unknown_jurisdiction(_: Request, exc: UnknownJurisdictionError) -> JSONResponse:
    return _error(400, str(exc.args[0]) if exc.args else "Unknown jurisdiction", "VALIDATION_ERROR")


@app.exception_handler(ValueError)
async def _value_error(_: Request, exc: ValueError) -> JSONResponse:
    return _error(400, f"Validation failed: {exc}", "VALIDATION_ERROR")


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _error(404, f"Route {request.method} {request.url.path} not found", "NOT_FOUND")
    return _error(exc.status_code, str(exc.detail), "HTTP_ERROR")


@app.exception_handler(Exception)
async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error", "INTERNAL_ERROR")


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", None) or get_settings()
    return {
        "status": "ok",
        "default_tax_year": settings.default_tax_year,
        "supported_years": list(SUPPORTED_YEARS),
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="taxca-api",
        description="Serve the Canadian tax calculator over HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1).")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000).")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes.")
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    import uvicorn

    args = _parse_args(argv)
    uvicorn.run("taxca.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    run()
