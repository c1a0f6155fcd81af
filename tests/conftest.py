import os

# SQLite по умолчанию для тестов
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_table_orders.db")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from table_orders.db.base import Base  # noqa: E402
from table_orders.db.session import build_engine  # noqa: E402
from table_orders.models import Menu, Table  # noqa: E402

TABLE_CODES = ["T-01", "T-02", "T-03"]
MENU_NAMES = ["M-01", "M-02", "M-03", "M-04", "M-05"]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path}/orders.db", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine):
    Session = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    async with Session() as session:
        yield session


@pytest.fixture
async def seeded(db):
    """Столы T-01..T-03 (id 1..3) и блюда M-01..M-05 (id 1..5)."""
    db.add_all([Table(code=code) for code in TABLE_CODES])
    db.add_all([Menu(name=name) for name in MENU_NAMES])
    await db.commit()
    return db
