import logging
import os
import sys

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from exceptions import BillingError, NotFoundError, UnitOfWorkStateError
from routers import clients_router, invoices_router, payments_router

# Load .env
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(level: str = None) -> None:
    """Send application logs to stdout at LOG_LEVEL (INFO by default)."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]


def register_error_handlers(app: FastAPI) -> None:
    """Translate engine outcomes into HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning("%s %s - %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

    @app.exception_handler(UnitOfWorkStateError)
    async def state_error_handler(request: Request, exc: UnitOfWorkStateError):
        logger.error("%s %s - unit of work misuse: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal transaction error"},
        )

    @app.exception_handler(BillingError)
    async def billing_error_handler(request: Request, exc: BillingError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning("%s %s - constraint violation: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "The request conflicts with stored data"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("%s %s - database error", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Database operation failed"},
        )


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Billing API")

    # CORS
    origins = [origin for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(clients_router)
    app.include_router(invoices_router)
    app.include_router(payments_router)

    @app.get("/health")
    def health():
        from database import check_connection
        return {"database": "ok" if check_connection() else "unavailable"}

    return app


# App instance
app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
