from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./table_orders.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # диапазон начальной оценки времени готовки позиции (минуты, включительно)
    COOKING_TIME_MIN: int = 5
    COOKING_TIME_MAX: int = 15

    class Config:
        env_file = ".env"

settings = Settings()
