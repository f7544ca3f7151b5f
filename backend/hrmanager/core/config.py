"""Application configuration utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel


class Settings(BaseModel):
    CANDIDATES_FILE: Path = Path("data/candidates.json")
    POSITIONS_FILE: Path = Path("data/positions.json")
    INTERVIEWS_FILE: Path = Path("data/interviews.json")
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        CANDIDATES_FILE=os.getenv("HR_CANDIDATES_FILE", "data/candidates.json"),
        POSITIONS_FILE=os.getenv("HR_POSITIONS_FILE", "data/positions.json"),
        INTERVIEWS_FILE=os.getenv("HR_INTERVIEWS_FILE", "data/interviews.json"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    )


settings = get_settings()
