from typing import List

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from table_orders.crud.order_views import list_open_orders, list_items_for_table, get_item_for_table
from table_orders.db.session import get_async_session
from table_orders.errors import NotFound
from table_orders.schemas.order import MAX_ID, OrderCreate, OrderItemRead, OrderRead, RemovalOutcome
from table_orders.services.cooking_time import CookingTimeEstimator, get_cooking_time_estimator
from table_orders.services.order_lifecycle import submit_order, remove_one_unit


router = APIRouter(tags=["orders"])

REMOVAL_MESSAGES = {
    RemovalOutcome.quantity_reduced: "Menu quantity updated successfully",
    RemovalOutcome.item_removed: "Menu deleted successfully",
    RemovalOutcome.item_removed_and_order_closed: "Menu deleted successfully and order deleted",
}


@router.post("/orders")
async def create_order_endpoint(
    order_in: OrderCreate,
    db: AsyncSession = Depends(get_async_session),
    estimator: CookingTimeEstimator = Depends(get_cooking_time_estimator),
):
    """
    Добавляет блюда в заказ стола.
    201, если заказ создан; 200, если дополнен существующий.
    """
    result = await submit_order(db, order_in.table_id, order_in.menu_ids, estimator=estimator)
    if result.created:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={
                "id": result.order_id,
                "created": True,
                "success": "Order and All Order Item Created Successfully",
            },
        )
    return {
        "id": result.order_id,
        "created": False,
        "success": "All order items updated successfully",
    }


@router.get("/orders", response_model=List[OrderRead])
async def list_orders(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает все открытые заказы с позициями.
    """
    return await list_open_orders(db)


@router.get("/tables/{table_id}/items", response_model=List[OrderItemRead])
async def list_table_items(
    table_id: int = Path(..., ge=1, le=MAX_ID, description="ID стола"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Возвращает позиции открытого заказа стола.
    """
    return await list_items_for_table(db, table_id)


@router.get("/tables/{table_id}/items/{menu_id}", response_model=OrderItemRead)
async def get_table_item(
    table_id: int = Path(..., ge=1, le=MAX_ID, description="ID стола"),
    menu_id: int = Path(..., ge=1, le=MAX_ID, description="ID блюда"),
    db: AsyncSession = Depends(get_async_session),
):
    item = await get_item_for_table(db, table_id, menu_id)
    if item is None:
        raise NotFound("No Item Found")
    return item


@router.delete("/tables/{table_id}/items/{menu_id}")
async def remove_table_item(
    table_id: int = Path(..., ge=1, le=MAX_ID, description="ID стола"),
    menu_id: int = Path(..., ge=1, le=MAX_ID, description="ID блюда"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Убирает одну порцию блюда из заказа стола.
    Последняя позиция закрывает заказ.
    """
    outcome = await remove_one_unit(db, table_id, menu_id)
    if outcome is RemovalOutcome.not_found:
        raise NotFound("No Item Found")
    return {"success": REMOVAL_MESSAGES[outcome], "outcome": outcome.value}
