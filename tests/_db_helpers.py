from sqlalchemy import select

from table_orders.models import Order, OrderItem


async def count_orders(db) -> int:
    result = await db.execute(select(Order.id))
    return len(result.all())


async def fetch_lines(db, table_id: int):
    """(menu_id, quantity, cooking_time) позиций открытого заказа стола."""
    result = await db.execute(
        select(OrderItem.menu_id, OrderItem.quantity, OrderItem.cooking_time)
        .join(Order, Order.id == OrderItem.order_id)
        .where(Order.table_id == table_id)
        .order_by(OrderItem.id)
    )
    return [tuple(row) for row in result.all()]
