"""
Жизненный цикл открытого заказа стола.

Заказ создаётся первой отправкой блюд для стола и удаляется, когда из него
убрана последняя позиция. Каждый вызов репозитория коммитится отдельно:
если отправка падает посреди списка блюд, уже добавленные позиции остаются.
Повторная отправка безопасна, одинаковые блюда сливаются в одну позицию.

Удаление (уменьшить -> удалить позицию -> закрыть заказ) не атомарно и
рассчитано на одного пишущего клиента на стол.
"""
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from table_orders.crud import order as order_repo
from table_orders.errors import ConstraintViolation, InvalidRequest
from table_orders.schemas.order import OrderSubmitResult, RemovalOutcome
from table_orders.services.cooking_time import CookingTimeEstimator, get_cooking_time_estimator

logger = logging.getLogger(__name__)


async def _add_item(db: AsyncSession, order_id: int, menu_id: int, estimator: CookingTimeEstimator) -> None:
    item_id = await order_repo.find_item(db, order_id, menu_id)
    if item_id is not None:
        await order_repo.increment_quantity(db, item_id)
        return

    try:
        await order_repo.create_item(db, order_id, menu_id, estimator())
    except ConstraintViolation:
        # позицию мог создать параллельный запрос; иначе это неверный menu_id
        item_id = await order_repo.find_item(db, order_id, menu_id)
        if item_id is None:
            raise
        await order_repo.increment_quantity(db, item_id)


async def _open_order(db: AsyncSession, table_id: int) -> tuple[int, bool]:
    order_id = await order_repo.find_open_order(db, table_id)
    if order_id is not None:
        return order_id, False

    try:
        return await order_repo.create_order(db, table_id), True
    except ConstraintViolation:
        # UNIQUE(table_id): заказ успел открыть параллельный запрос
        order_id = await order_repo.find_open_order(db, table_id)
        if order_id is None:
            raise
        logger.info("Order for table_id=%s was opened concurrently, extending id=%s", table_id, order_id)
        return order_id, False


async def submit_order(
    db: AsyncSession,
    table_id: int,
    menu_ids: List[int],
    estimator: Optional[CookingTimeEstimator] = None,
) -> OrderSubmitResult:
    """
    Добавляет блюда в открытый заказ стола, создавая заказ при необходимости.
    Повторяющиеся menu_id (в запросе или между запросами) увеличивают
    quantity существующей позиции.
    """
    if not menu_ids:
        raise InvalidRequest("Please Add Items")
    if estimator is None:
        estimator = get_cooking_time_estimator()

    order_id, created = await _open_order(db, table_id)
    for menu_id in menu_ids:
        await _add_item(db, order_id, menu_id, estimator)

    logger.info(
        "Submitted %d item(s) to order id=%s for table_id=%s (created=%s)",
        len(menu_ids), order_id, table_id, created,
    )
    return OrderSubmitResult(order_id=order_id, created=created)


async def remove_one_unit(db: AsyncSession, table_id: int, menu_id: int) -> RemovalOutcome:
    """
    Убирает одну порцию блюда из открытого заказа стола.

    quantity > 1 -> уменьшаем (quantity_reduced).
    quantity == 1 -> удаляем позицию; если заказ опустел, удаляем и его.
    Позиции нет -> not_found, база не меняется.
    """
    if await order_repo.decrement_one_unit(db, table_id, menu_id):
        return RemovalOutcome.quantity_reduced

    if not await order_repo.delete_item(db, table_id, menu_id):
        return RemovalOutcome.not_found

    order_id = await order_repo.find_open_order(db, table_id)
    if order_id is None:
        # заказ уже удалён параллельным запросом
        return RemovalOutcome.item_removed_and_order_closed

    if await order_repo.order_has_items(db, order_id):
        return RemovalOutcome.item_removed

    await order_repo.delete_order(db, order_id)
    return RemovalOutcome.item_removed_and_order_closed
