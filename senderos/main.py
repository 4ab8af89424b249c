"""Entry point for the reservations FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from senderos import __version__
from senderos.api import v1_router
from senderos.core.config import settings
from senderos.core.error_handlers import register_exception_handlers
from senderos.core.logging import configure_logging
from senderos.db.migrate import create_tables

configure_logging()

# Ensure database tables exist when the application starts (for development purposes).
create_tables()

app = FastAPI(title=settings.PROJECT_NAME, version=__version__)

register_exception_handlers(app)

# Requests without an Origin header (native apps, server-to-server) are not
# subject to CORS and always reach the routes.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
)

app.include_router(v1_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}


__all__ = ["app"]
