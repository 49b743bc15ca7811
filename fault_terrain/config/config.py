from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load a local .env for development, without overriding the real environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Terrain Generation Configuration
    terrain_width: int = Field(default=128, ge=1, description="Default terrain width")
    terrain_height: int = Field(default=128, ge=1, description="Default terrain height")
    fault_iterations: int = Field(default=500, ge=0, description="Number of fault lines per terrain")
    max_change: float = Field(default=1.25, description="Height change at the first iteration")
    min_change: float = Field(default=0.25, description="Height change approached at the last iteration")
    random_seed: Optional[int] = Field(default=None, ge=0, description="Seed for reproducible terrain")
    max_terrain_size: int = Field(default=1024, ge=1, description="Max allowed terrain width or height")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
