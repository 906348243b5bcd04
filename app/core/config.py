from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./timetable.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # cria as tabelas que faltam no startup (dev). Em produção use alembic
    CREATE_TABLES: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
