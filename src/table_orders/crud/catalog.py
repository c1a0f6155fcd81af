from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from table_orders.crud.storage import storage_errors
from table_orders.errors import ConstraintViolation
from table_orders.models import Table, Menu


async def list_tables(db: AsyncSession) -> List[Table]:
    async with storage_errors(db, "listing tables"):
        result = await db.execute(select(Table).order_by(Table.id))
        return result.scalars().all()


async def get_existing_table_id(db: AsyncSession, code: str) -> Optional[int]:
    async with storage_errors(db, "looking up table"):
        result = await db.execute(select(Table.id).where(Table.code == code))
        return result.scalar_one_or_none()


async def create_table(db: AsyncSession, code: str) -> int:
    """
    Регистрирует стол. Если код уже занят, возвращает существующий id.
    """
    table_id = await get_existing_table_id(db, code)
    if table_id is not None:
        return table_id

    try:
        async with storage_errors(db, "creating table"):
            table = Table(code=code)
            db.add(table)
            await db.commit()
            await db.refresh(table)
    except ConstraintViolation:
        # UNIQUE(code): стол успел зарегистрировать параллельный запрос
        table_id = await get_existing_table_id(db, code)
        if table_id is None:
            raise
        return table_id
    return table.id


async def list_menus(db: AsyncSession) -> List[Menu]:
    async with storage_errors(db, "listing menus"):
        result = await db.execute(select(Menu).order_by(Menu.id))
        return result.scalars().all()


async def get_existing_menu_id(db: AsyncSession, name: str) -> Optional[int]:
    async with storage_errors(db, "looking up menu"):
        result = await db.execute(select(Menu.id).where(Menu.name == name).limit(1))
        return result.scalar_one_or_none()


async def create_menu(db: AsyncSession, name: str) -> int:
    """
    Регистрирует блюдо. Повторное имя возвращает существующий id.
    """
    menu_id = await get_existing_menu_id(db, name)
    if menu_id is not None:
        return menu_id

    try:
        async with storage_errors(db, "creating menu"):
            menu = Menu(name=name)
            db.add(menu)
            await db.commit()
            await db.refresh(menu)
    except ConstraintViolation:
        # UNIQUE(name): блюдо успел зарегистрировать параллельный запрос
        menu_id = await get_existing_menu_id(db, name)
        if menu_id is None:
            raise
        return menu_id
    return menu.id
