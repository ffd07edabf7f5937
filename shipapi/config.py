from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")

    # Ship store settings
    # Supported stores:
    # - memory: Ships live in process memory and are lost on restart
    # - database: Ships are persisted through SQLModel (see database_url)
    ship_store: Literal["memory", "database"] = Field(
        default="memory", description="Backing store for ships"
    )

    # CORS settings
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Origins allowed to call the API from a browser"
    )

    # Database settings
    database_url: str = Field(
        default="sqlite+aiosqlite:///./ships.db", description="Database connection URL"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
