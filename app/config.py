# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_TOKEN = os.getenv("API_TOKEN", "")

# Wizard Settings
_VALIDATION_DEBOUNCE_MS = int(os.getenv("VALIDATION_DEBOUNCE_MS", "150"))
_LOAD_PERCENTAGE_TOLERANCE = float(os.getenv("LOAD_PERCENTAGE_TOLERANCE", "0.01"))
_INSPECTION_REQUIRED_PHOTOS = int(os.getenv("INSPECTION_REQUIRED_PHOTOS", "6"))

# Localization
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "es")

# Logging
_LOGS_DIR = os.getenv("LOGS_DIR", None)
_LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() in ("true", "1", "yes")
_CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "INFO")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Field Visits"
    APP_TITLE: str = "Field Visits & Inspections Back Office"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_TOKEN)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_TOKEN: str = _API_TOKEN
    VISITS_ENDPOINT: str = "/visits"
    INSPECTIONS_ENDPOINT: str = "/inspections"

    # Wizard behaviour
    VALIDATION_DEBOUNCE_MS: int = _VALIDATION_DEBOUNCE_MS
    LOAD_PERCENTAGE_TOTAL: float = 100.0
    LOAD_PERCENTAGE_TOLERANCE: float = _LOAD_PERCENTAGE_TOLERANCE
    CONTAINER_DESCRIPTION_MIN_LENGTH: int = 10
    INSPECTION_REQUIRED_PHOTOS: int = _INSPECTION_REQUIRED_PHOTOS

    # Localization
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE
    SUPPORTED_LANGUAGES: tuple = ("es", "en")

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_TO_FILE: bool = _LOG_TO_FILE
    CONSOLE_LOG_LEVEL: str = _CONSOLE_LOG_LEVEL
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3


class PowerSources:
    """Power source options offered by the logistics analysis wizard."""
    ELECTRIC = "ELECTRIC"
    DIESEL = "DIESEL"
    LPG = "LPG"

    ALL = (ELECTRIC, DIESEL, LPG)
