from pydantic_settings import BaseSettings
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    # Templates
    TEMPLATE_FILE: Path = Field(default=Path("configs/templates.toml"), description="TOML or JSON template file")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level name")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    class Config:
        env_file = ".env"

settings = Settings()
