import pytest

from table_orders.crud import catalog
from table_orders.crud.catalog import create_menu, create_table, list_menus, list_tables


def _stale_once(real):
    # первый вызов видит состояние до параллельной вставки
    calls = {"n": 0}

    async def lookup(db, key):
        calls["n"] += 1
        if calls["n"] == 1:
            return None
        return await real(db, key)

    return lookup


@pytest.mark.anyio
async def test_create_table_is_idempotent_by_code(db):
    first = await create_table(db, "T-01")
    second = await create_table(db, "T-02")

    assert await create_table(db, "T-01") == first
    assert [(t.id, t.code) for t in await list_tables(db)] == [(first, "T-01"), (second, "T-02")]


@pytest.mark.anyio
async def test_create_menu_is_idempotent_by_name(db):
    menu_id = await create_menu(db, "Borscht")

    assert await create_menu(db, "Borscht") == menu_id
    assert [m.name for m in await list_menus(db)] == ["Borscht"]


@pytest.mark.anyio
async def test_create_table_returns_id_registered_concurrently(db, monkeypatch):
    first = await create_table(db, "T-01")
    monkeypatch.setattr(catalog, "get_existing_table_id", _stale_once(catalog.get_existing_table_id))

    # вставка упирается в UNIQUE(code), id берётся повторным поиском
    assert await create_table(db, "T-01") == first
    assert [t.code for t in await list_tables(db)] == ["T-01"]


@pytest.mark.anyio
async def test_create_menu_returns_id_registered_concurrently(db, monkeypatch):
    menu_id = await create_menu(db, "Borscht")
    monkeypatch.setattr(catalog, "get_existing_menu_id", _stale_once(catalog.get_existing_menu_id))

    assert await create_menu(db, "Borscht") == menu_id
    assert [m.name for m in await list_menus(db)] == ["Borscht"]
