import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from table_orders.errors import ConstraintViolation, StorageFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_errors(db: AsyncSession, action: str) -> AsyncIterator[None]:
    """
    Переводит ошибки SQLAlchemy в ошибки сервиса.
    IntegrityError -> ConstraintViolation, остальное -> StorageFailure.
    Сессия откатывается, чтобы её можно было использовать дальше.
    """
    try:
        yield
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Constraint violation while %s: %s", action, exc.orig)
        raise ConstraintViolation(f"Error {action}: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Storage failure while %s", action)
        raise StorageFailure(f"Error {action}") from exc
