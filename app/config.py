# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from datetime import datetime
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Remote store (PostgREST / Supabase)
_SUPABASE_URL = os.getenv("SUPABASE_URL", "http://localhost:54321")
_SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

# Extraction function
_EXTRACTION_FUNCTION = os.getenv("EXTRACTION_FUNCTION", "extract-questions")
_EXTRACTION_TIMEOUT = int(os.getenv("EXTRACTION_TIMEOUT", "300"))
_MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "50"))

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Question Extractor"
    APP_TITLE: str = "Extract and categorize questions from PDF files"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Question Bank"

    # Remote store
    SUPABASE_URL: str = _SUPABASE_URL
    SUPABASE_ANON_KEY: str = _SUPABASE_ANON_KEY
    API_TIMEOUT: int = _API_TIMEOUT

    # Extraction
    EXTRACTION_FUNCTION: str = _EXTRACTION_FUNCTION
    EXTRACTION_TIMEOUT: int = _EXTRACTION_TIMEOUT
    MAX_UPLOAD_MB: int = _MAX_UPLOAD_MB
    PDF_EXTENSION: str = ".pdf"

    # Wizard
    YEAR_MIN: int = 2000
    YEAR_MAX: int = 2030
    DEFAULT_YEAR: int = datetime.now().year

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 900
    WINDOW_MIN_HEIGHT: int = 700
    TOAST_DURATION_MS: int = 3000

    # Colors
    PRIMARY_COLOR: str = "#2563EB"
    PRIMARY_DARK: str = "#1D4ED8"
    TEXT_COLOR: str = "#111827"
    TEXT_LIGHT: str = "#4B5563"
    BACKGROUND_COLOR: str = "#EEF2FF"
    CARD_BACKGROUND: str = "#FFFFFF"
    BORDER_COLOR: str = "#D1D5DB"
    SUCCESS_COLOR: str = "#16A34A"
    WARNING_COLOR: str = "#F59E0B"
    ERROR_COLOR: str = "#DC2626"
    INFO_COLOR: str = "#0EA5E9"

