"""Runtime configuration for the listing tools."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from pydantic import BaseModel


DEFAULT_COST = "1"
DEFAULT_EXTENSION = "jpg"

CSV_FILE_PREFIX = "LUSH_MASTER_"
BATCH_ZIP_PREFIX = "LUSH_"
ARCHIVE_ZIP_PREFIX = "LUSH_ARCHIVE_MASTER_"

CSV_MEDIA_TYPE = "text/csv;charset=utf-8"
ZIP_MEDIA_TYPE = "application/zip"


class CsvConstants(BaseModel):
    """Business fields written identically on every exported row."""

    category: str = "Bags & Accessories"
    sub_category: str = "Luxury Bags & Accessories"
    description: str = "Pre-Owned"
    quantity: str = "1"
    type: str = "Auction"
    price: str = "1"
    shipping: str = "1lbs"
    offerable: str = "TRUE"
    hazmat: str = "Not Hazardous"
    condition: str = "Very Good"


@dataclass
class Settings:
    output_dir: str = field(default_factory=lambda: os.environ.get("LUSH_OUTPUT_DIR", "."))
    log_level: str = field(default_factory=lambda: os.environ.get("LUSH_LOG_LEVEL", "INFO"))


@dataclass
class IdentifierConfig:
    api_key: str | None = field(default_factory=lambda: os.environ.get("GEMINI_API_KEY"))
    model: str = field(default_factory=lambda: os.environ.get("GEMINI_MODEL", "gemini-2.0-flash"))
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        )
    )
    timeout_secs: float = field(default_factory=lambda: float(os.environ.get("GEMINI_TIMEOUT_SECS", "30")))
    max_options: int = 3
