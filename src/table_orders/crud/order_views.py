from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from table_orders.crud.storage import storage_errors
from table_orders.models import Order, OrderItem, Menu
from table_orders.schemas.order import OrderItemRead, OrderRead


def _items_stmt(table_id: int):
    return (
        select(
            OrderItem.id,
            OrderItem.order_id,
            Order.table_id,
            OrderItem.menu_id,
            Menu.name.label("menu_name"),
            OrderItem.cooking_time,
            OrderItem.quantity,
        )
        .join(Order, Order.id == OrderItem.order_id)
        .join(Menu, Menu.id == OrderItem.menu_id)
        .where(Order.table_id == table_id)
        .order_by(OrderItem.id)
    )


async def list_open_orders(db: AsyncSession) -> List[OrderRead]:
    """
    Все открытые заказы с позициями.
    Подгружаем items -> menu и table, чтобы не было lazy load.
    """
    stmt = (
        select(Order)
        .options(
            selectinload(Order.items).selectinload(OrderItem.menu),
            selectinload(Order.table),
        )
        .order_by(Order.id)
        # коллекции items, загруженные ранее в этой сессии, могли устареть
        .execution_options(populate_existing=True)
    )
    async with storage_errors(db, "listing orders"):
        result = await db.execute(stmt)
        orders = result.scalars().unique().all()
    return [OrderRead.from_orm_with_name(o) for o in orders]


async def list_items_for_table(db: AsyncSession, table_id: int) -> List[OrderItemRead]:
    """
    Позиции открытого заказа стола (пустой список, если заказа нет).
    """
    async with storage_errors(db, "listing order items"):
        result = await db.execute(_items_stmt(table_id))
        rows = result.all()
    return [OrderItemRead(**row._mapping) for row in rows]


async def get_item_for_table(db: AsyncSession, table_id: int, menu_id: int) -> Optional[OrderItemRead]:
    async with storage_errors(db, "retrieving order item"):
        result = await db.execute(_items_stmt(table_id).where(OrderItem.menu_id == menu_id))
        row = result.first()
    if row is None:
        return None
    return OrderItemRead(**row._mapping)
