"""
Configuration loading for SplitBills
"""
from __future__ import annotations
import json
import logging
import os
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from models import DEFAULT_IMAGE, Ledger
from labels import LANGUAGES
from utils import app_dir

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """User preferences read from settings.json; unknown keys are ignored"""
    language: Literal["en", "ar"] = "en"
    currency_symbol: str = "$"
    default_image: str = DEFAULT_IMAGE
    log_level: str = "INFO"

    @field_validator("language", mode="before")
    @classmethod
    def known_language(cls, v):
        return v if v in LANGUAGES else "en"

    @field_validator("currency_symbol", "default_image", mode="before")
    @classmethod
    def blank_to_default(cls, v, info):
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return str(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def known_level(cls, v):
        name = str(v).upper() if v is not None else "INFO"
        # getLevelName maps registered names to their int level
        return name if isinstance(logging.getLevelName(name), int) else "INFO"


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from JSON file; missing file or keys fall back to defaults"""
    if path is None:
        path = os.path.join(app_dir(), "settings.json")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return Settings()

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object, got %s", path, type(data).__name__)
        return Settings()
    return Settings(**data)


def get_default_ledger() -> Ledger:
    """Create a fresh ledger holding only the owner"""
    return Ledger()
