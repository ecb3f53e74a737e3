# bookshelf/main.py
import logging
import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .catalog import BookRepository, catalog_router
from .catalog.store import CatalogError
from .config import Settings, settings as default_settings


logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Send every log record to stdout with a single formatter."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # avoid duplicate handlers when called more than once
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(name)s - %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(stdout_handler)


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc looks like ("body", "pageCount") or ("body",) for a missing body
    loc = [str(p) for p in first.get("loc", ()) if p != "body"]
    field = ".".join(loc)
    msg = first.get("msg", "invalid value")
    return f"Invalid request: {field}: {msg}" if field else f"Invalid request: {msg}"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description="Microservice managing a reading list of books held in memory.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.books = BookRepository()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logger.warning(
            "%s %s -> %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return _fail(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
        return _fail(400, message)

    # 🔹 Base route for a quick liveness check
    @app.get("/")
    def health_check():
        return {"status": "ok", "message": f"{settings.app_name} is running"}

    app.include_router(catalog_router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    setup_logging(default_settings.log_level)
    logger.info("Starting server on http://%s:%s", default_settings.host, default_settings.port)
    uvicorn.run(
        "bookshelf.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.reload,
    )


if __name__ == "__main__":
    run()
