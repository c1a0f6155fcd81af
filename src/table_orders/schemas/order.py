from enum import Enum
from typing import List

from pydantic import BaseModel, conint

# верхняя граница BIGINT; большие id отклоняются валидацией (422)
MAX_ID = 2**63 - 1
DbId = conint(ge=1, le=MAX_ID)


class OrderItemRead(BaseModel):
    id: int
    order_id: int
    table_id: int
    menu_id: int
    menu_name: str | None = None
    cooking_time: int
    quantity: int

    @classmethod
    def from_orm_with_name(cls, item, table_id: int):
        return cls(
            id=item.id,
            order_id=item.order_id,
            table_id=table_id,
            menu_id=item.menu_id,
            menu_name=item.menu.name if item.menu else None,
            cooking_time=item.cooking_time,
            quantity=item.quantity,
        )

    class Config:
        from_attributes = True


class OrderRead(BaseModel):
    id: int
    table_id: int
    table_code: str | None = None
    items: List[OrderItemRead] = []
    count_items: int
    total_cooking_time: int

    @classmethod
    def from_orm_with_name(cls, order):
        items = [OrderItemRead.from_orm_with_name(i, order.table_id) for i in order.items]
        return cls(
            id=order.id,
            table_id=order.table_id,
            table_code=order.table.code if getattr(order, "table", None) else None,
            items=items,
            count_items=sum(i.quantity for i in items),
            total_cooking_time=sum(i.cooking_time for i in items),
        )

    class Config:
        from_attributes = True


class OrderCreate(BaseModel):
    # пустой список не режем здесь: его отклоняет сервис с "Please Add Items"
    table_id: DbId
    menu_ids: List[DbId]


class OrderSubmitResult(BaseModel):
    order_id: int
    created: bool


class RemovalOutcome(str, Enum):
    quantity_reduced = "quantity_reduced"
    item_removed = "item_removed"
    item_removed_and_order_closed = "item_removed_and_order_closed"
    not_found = "not_found"
