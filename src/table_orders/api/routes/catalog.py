from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from table_orders.crud.catalog import list_tables, create_table, list_menus, create_menu
from table_orders.db.session import get_async_session
from table_orders.schemas.catalog import CreatedId, MenuCreate, MenuOut, TableCreate, TableOut

router = APIRouter(tags=["catalog"])


@router.get("/tables", response_model=List[TableOut])
async def list_tables_endpoint(db: AsyncSession = Depends(get_async_session)):
    return await list_tables(db)


@router.post("/tables", response_model=CreatedId, status_code=status.HTTP_201_CREATED)
async def create_table_endpoint(table_in: TableCreate, db: AsyncSession = Depends(get_async_session)):
    """
    Регистрирует стол. Существующий код возвращает прежний id.
    """
    return CreatedId(id=await create_table(db, table_in.code))


@router.get("/menus", response_model=List[MenuOut])
async def list_menus_endpoint(db: AsyncSession = Depends(get_async_session)):
    return await list_menus(db)


@router.post("/menus", response_model=CreatedId, status_code=status.HTTP_201_CREATED)
async def create_menu_endpoint(menu_in: MenuCreate, db: AsyncSession = Depends(get_async_session)):
    return CreatedId(id=await create_menu(db, menu_in.name))
