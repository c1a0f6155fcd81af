import logging
from typing import Optional

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from table_orders.crud.storage import storage_errors
from table_orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


def _open_order_id(table_id: int):
    """Подзапрос: id открытого заказа стола."""
    return select(Order.id).where(Order.table_id == table_id).scalar_subquery()


async def find_open_order(db: AsyncSession, table_id: int) -> Optional[int]:
    """
    Возвращает id открытого заказа стола или None.
    Больше одного быть не может (UNIQUE на orders.table_id).
    """
    async with storage_errors(db, "checking for existing order"):
        result = await db.execute(select(Order.id).where(Order.table_id == table_id))
        return result.scalar_one_or_none()


async def create_order(db: AsyncSession, table_id: int) -> int:
    """
    Создаёт заказ для стола.
    ConstraintViolation, если стола нет или у него уже есть открытый заказ.
    """
    async with storage_errors(db, "creating order"):
        order = Order(table_id=table_id)
        db.add(order)
        await db.commit()
        await db.refresh(order)

    logger.info("Opened order id=%s for table_id=%s", order.id, table_id)
    return order.id


async def find_item(db: AsyncSession, order_id: int, menu_id: int) -> Optional[int]:
    async with storage_errors(db, "looking up order item"):
        result = await db.execute(
            select(OrderItem.id).where(
                OrderItem.order_id == order_id,
                OrderItem.menu_id == menu_id,
            )
        )
        return result.scalar_one_or_none()


async def create_item(db: AsyncSession, order_id: int, menu_id: int, cooking_time: int) -> int:
    """
    Создаёт позицию заказа с quantity=1.
    """
    async with storage_errors(db, "creating order item"):
        item = OrderItem(order_id=order_id, menu_id=menu_id, cooking_time=cooking_time, quantity=1)
        db.add(item)
        await db.commit()
        await db.refresh(item)

    logger.debug(
        "Created order item id=%s (order_id=%s, menu_id=%s, cooking_time=%s)",
        item.id, order_id, menu_id, cooking_time,
    )
    return item.id


async def increment_quantity(db: AsyncSession, item_id: int) -> None:
    """
    quantity += 1. Время готовки не пересчитывается.
    """
    async with storage_errors(db, "updating order item"):
        await db.execute(
            update(OrderItem)
            .where(OrderItem.id == item_id)
            .values(quantity=OrderItem.quantity + 1)
        )
        await db.commit()

    logger.debug("Incremented quantity of order item id=%s", item_id)


async def decrement_one_unit(db: AsyncSession, table_id: int, menu_id: int) -> bool:
    """
    Уменьшает количество позиции открытого заказа стола на 1,
    только если quantity > 1.

    Время готовки уменьшается на долю одной порции:
    cooking_time - cooking_time // quantity, где quantity берётся до уменьшения
    (в SET все выражения считаются по старым значениям строки).

    Возвращает True, если строка обновлена. False значит, что позиции нет
    или у неё quantity == 1 и её нужно удалять.
    """
    async with storage_errors(db, "updating quantity"):
        result = await db.execute(
            update(OrderItem)
            .where(
                OrderItem.order_id == _open_order_id(table_id),
                OrderItem.menu_id == menu_id,
                OrderItem.quantity > 1,
            )
            .values(
                cooking_time=OrderItem.cooking_time - OrderItem.cooking_time // OrderItem.quantity,
                quantity=OrderItem.quantity - 1,
            )
            .returning(OrderItem.id)
            .execution_options(synchronize_session="fetch")
        )
        updated = result.first() is not None
        await db.commit()

    if updated:
        logger.debug("Decremented menu_id=%s for table_id=%s", menu_id, table_id)
    return updated


async def delete_item(db: AsyncSession, table_id: int, menu_id: int) -> bool:
    """
    Удаляет позицию открытого заказа стола целиком.
    Возвращает True, если строка была удалена.
    """
    async with storage_errors(db, "deleting order item"):
        result = await db.execute(
            delete(OrderItem)
            .where(
                OrderItem.order_id == _open_order_id(table_id),
                OrderItem.menu_id == menu_id,
            )
            .returning(OrderItem.id)
            .execution_options(synchronize_session="fetch")
        )
        deleted = result.first() is not None
        await db.commit()

    return deleted


async def order_has_items(db: AsyncSession, order_id: int) -> bool:
    async with storage_errors(db, "checking order items"):
        result = await db.execute(
            select(OrderItem.id).where(OrderItem.order_id == order_id).limit(1)
        )
        return result.first() is not None


async def delete_order(db: AsyncSession, order_id: int) -> None:
    """
    Удаляет заказ (позиции удаляются каскадом).
    """
    async with storage_errors(db, "deleting order"):
        await db.execute(delete(Order).where(Order.id == order_id))
        await db.commit()

    logger.info("Closed order id=%s", order_id)
