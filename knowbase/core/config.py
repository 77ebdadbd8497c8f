from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24  # 1 день

    # Стоимость bcrypt, в тестах понижается
    bcrypt_rounds: int = 12

    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Для разработки: создавать таблицы без миграций
    create_tables_on_startup: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
