import pytest

from table_orders.crud.order_views import get_item_for_table, list_items_for_table, list_open_orders
from table_orders.services.cooking_time import FixedCookingTimeEstimator
from table_orders.services.order_lifecycle import remove_one_unit, submit_order


@pytest.mark.anyio
async def test_list_open_orders_empty(seeded):
    assert await list_open_orders(seeded) == []


@pytest.mark.anyio
async def test_list_open_orders_with_lines(seeded):
    await submit_order(seeded, 1, [1, 2, 1], estimator=FixedCookingTimeEstimator(6))
    await submit_order(seeded, 2, [3], estimator=FixedCookingTimeEstimator(9))

    orders = await list_open_orders(seeded)

    assert [o.table_code for o in orders] == ["T-01", "T-02"]
    first = orders[0]
    assert [(i.menu_name, i.quantity) for i in first.items] == [("M-01", 2), ("M-02", 1)]
    assert first.count_items == 3
    assert first.total_cooking_time == 12
    assert orders[1].items[0].cooking_time == 9


@pytest.mark.anyio
async def test_list_open_orders_reflects_removals(seeded):
    estimator = FixedCookingTimeEstimator(6)
    await submit_order(seeded, 1, [1, 1, 2], estimator=estimator)
    assert (await list_open_orders(seeded))[0].count_items == 3

    await remove_one_unit(seeded, 1, 1)
    await remove_one_unit(seeded, 1, 2)

    orders = await list_open_orders(seeded)
    assert [(i.menu_id, i.quantity, i.cooking_time) for i in orders[0].items] == [(1, 1, 3)]

    await remove_one_unit(seeded, 1, 1)
    assert await list_open_orders(seeded) == []


@pytest.mark.anyio
async def test_list_items_for_table(seeded):
    result = await submit_order(seeded, 1, [2, 4], estimator=FixedCookingTimeEstimator(7))

    items = await list_items_for_table(seeded, 1)

    assert [(i.menu_id, i.menu_name) for i in items] == [(2, "M-02"), (4, "M-04")]
    assert all(i.order_id == result.order_id and i.table_id == 1 for i in items)
    assert await list_items_for_table(seeded, 2) == []


@pytest.mark.anyio
async def test_get_item_for_table(seeded):
    await submit_order(seeded, 1, [1, 2], estimator=FixedCookingTimeEstimator(7))

    item = await get_item_for_table(seeded, 1, 2)

    assert item.menu_name == "M-02"
    assert item.quantity == 1
    assert item.cooking_time == 7
    assert await get_item_for_table(seeded, 1, 3) is None
    assert await get_item_for_table(seeded, 2, 2) is None
