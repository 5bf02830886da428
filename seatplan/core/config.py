"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings

def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")

class Settings(BaseSettings):
    """Application settings"""
    
    # Application
    APP_NAME: str = os.getenv("APP_NAME", "Wedding Seat Planner")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:8000",
        "http://localhost:8081",
    ]
    
    # Auto-arrangement defaults, applied when a request leaves a constraint out
    DEFAULT_RESPECT_RELATIONSHIPS: bool = _env_flag("DEFAULT_RESPECT_RELATIONSHIPS")
    DEFAULT_CONSIDER_DIETARY_RESTRICTIONS: bool = _env_flag("DEFAULT_CONSIDER_DIETARY_RESTRICTIONS")
    DEFAULT_KEEP_FAMILIES_TOGETHER: bool = _env_flag("DEFAULT_KEEP_FAMILIES_TOGETHER")
    DEFAULT_OPTIMIZE_VENUE_PROXIMITY: bool = _env_flag("DEFAULT_OPTIMIZE_VENUE_PROXIMITY")
    DEFAULT_BALANCE_BRIDE_GROOM_SIDES: bool = _env_flag("DEFAULT_BALANCE_BRIDE_GROOM_SIDES")
    DEFAULT_MIN_GUESTS_PER_TABLE: int = int(os.getenv("DEFAULT_MIN_GUESTS_PER_TABLE", "2"))
    DEFAULT_MAX_GUESTS_PER_TABLE: int = int(os.getenv("DEFAULT_MAX_GUESTS_PER_TABLE", "8"))
    DEFAULT_PREFERRED_TABLE_DISTANCE: float = float(os.getenv("DEFAULT_PREFERRED_TABLE_DISTANCE", "100"))
    
    class Config:
        env_file = ".env"

settings = Settings()
