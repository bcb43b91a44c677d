"""Configuration management for the Weekly Menu application."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, '').strip()
    return int(raw) if raw else None


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'debug' if DEBUG else 'info').lower()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
RECIPES_FILE: Final[Path] = Path(os.getenv('MENU_RECIPES_FILE', str(DATA_DIR / 'recipes.json')))

# Planning
# Seed for the plan cache's random source; unset means a fresh random plan per process
RANDOM_SEED: Final[Optional[int]] = _optional_int('MENU_RANDOM_SEED')
