from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    api_url: str = "http://localhost:8000/api"
    timeout: float = 10.0
    token_file: Path = Path.home() / ".knowbase" / "session.json"

    model_config = SettingsConfigDict(env_prefix="KNOWBASE_CLIENT_", env_file=".env", extra="ignore")
