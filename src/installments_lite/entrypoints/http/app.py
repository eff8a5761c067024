from fastapi import FastAPI

from installments_lite.entrypoints.http.exception_handlers import register_exception_handlers
from installments_lite.entrypoints.http.routes.health import router as health_router
from installments_lite.entrypoints.http.routes.installments import router as installments_router
from installments_lite.infra.config import log_level
from installments_lite.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    app = FastAPI(
        title="Installments Lite API",
        description="""
        Installment financing offers for storefront widgets.

        ## Features
        - Cheapest monthly rate for a product price (detail and cart pages)
        - Ranked comparison list with a best value highlight
        - Read access to per-shop installments settings

        ## Monetary Values
        All amounts are decimal strings (e.g. "349.99").

        ## Error Handling
        Errors return structured JSON with error codes. When no widget should be
        shown the widget endpoints answer 204 No Content instead of an error.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(installments_router, prefix="/v1")

    return app


configure_logging(log_level())
app = build_app()
