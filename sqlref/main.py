# sqlref/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from . import __version__
from .catalog.router import router as catalog_router
from .catalog.store import Catalog, get_catalog


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A LoadError here aborts startup; no partial catalog is served.
    catalog = get_catalog()
    logger.info("Serving %d catalog entries", len(catalog))
    yield


app = FastAPI(
    title="SQL Reference Catalog",
    description=(
        "Read-only lookup service over a reference guide of SQL clauses, "
        "joins, constraints and relational-algebra operators."
    ),
    version=__version__,
    lifespan=lifespan,
)
app.include_router(catalog_router)


@app.get("/")
def health_check(catalog: Catalog = Depends(get_catalog)):
    return {"status": "ok", "entries": len(catalog)}
