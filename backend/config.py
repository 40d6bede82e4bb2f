"""
Runtime configuration for Pacsnek.

Settings come from the environment (a local .env file is loaded on import):
- PACSNEK_LEVEL: path to the level text file (default: bundled level 1)
- PACSNEK_LOG_LEVEL: logging level name (default: INFO)

Gameplay constants (move cadence, power-up length, viewport width) are fixed
in domain.constants, not read from the environment.
"""

import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LEVEL_PATH = Path(__file__).parent / "domain" / "levels" / "level-1.txt"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_level_path() -> Path:
    return Path(os.getenv('PACSNEK_LEVEL') or DEFAULT_LEVEL_PATH)


def get_log_level() -> str:
    return (os.getenv('PACSNEK_LOG_LEVEL') or 'INFO').upper()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=level or get_log_level(), format=LOG_FORMAT)
