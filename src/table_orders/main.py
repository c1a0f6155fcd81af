import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import health
from .config import settings
from .db.session import engine
from .errors import TableOrdersError
from table_orders.api.routes.catalog import router as catalog_router
from table_orders.api.routes.orders import router as orders_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application started")
    yield
    await engine.dispose()
    logger.info("Application stopped")


app = FastAPI(title="Table Orders", lifespan=lifespan)


@app.exception_handler(TableOrdersError)
async def table_orders_error_handler(request: Request, exc: TableOrdersError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Подключаем роуты
app.include_router(health.router)
app.include_router(catalog_router)
app.include_router(orders_router)
