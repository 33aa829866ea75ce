"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks UNICALC_.
"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ewaluator wyrażeń (głębokość <= połowa domyślnego limitu rekursji)
    max_nesting_depth: int = Field(default=200, ge=0, le=500)
    strict_parentheses: bool = False

    # Calculus
    derivative_step: float = 1e-6
    derivative_method: str = "forward"
    integration_intervals: int = 1000
    integration_method: str = "simpson"

    # Probability (None = losowe ziarno)
    random_seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "UniCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="UNICALC_", env_file=".env", extra="ignore")
