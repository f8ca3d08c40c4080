# bookcatalog/main.py
"""
FastAPI entrypoint for the book catalog.

``create_app`` builds the store, seeds it when configured to and
attaches it to ``app.state`` before mounting the catalog router. The
module-level ``app`` lets uvicorn find the application directly::

    uvicorn bookcatalog.main:app --reload
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .catalog import CatalogStore, catalog_router
from .config import Settings, settings as default_settings
from .logging_config import setup_logging


logger = logging.getLogger(__name__)


def create_app(store: Optional[CatalogStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    store : Optional[CatalogStore]
        Store to serve. When omitted a new one is created and, if
        ``settings.seed_on_startup`` is set, seeded with the sample books.
    settings : Optional[Settings]
        Overrides the environment-derived settings.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = CatalogStore()
        if settings.seed_on_startup:
            store.seed()

    app = FastAPI(
        title=settings.title,
        description="In-memory book catalogue: add, remove and search books.",
        version=settings.version,
    )
    app.state.store = store
    app.include_router(catalog_router)

    @app.get("/")
    def health_check():
        return {"status": "ok", "books": len(app.state.store)}

    logger.info("Catalog app ready with %d book(s)", len(store))
    return app


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_level="info")


if __name__ == "__main__":
    run()
