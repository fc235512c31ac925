"""
Central configuration for streamind.

All settings are loaded from environment variables (prefix ``STREAMIND_``)
with sensible defaults. Derived indicators read their default periods from
here when constructed without explicit arguments.
"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    log_level: str = "INFO"

    # --- RSI ---
    rsi_period: int = Field(default=14, ge=1)
    rsi_oversold_threshold: float = 30.0
    rsi_overbought_threshold: float = 70.0

    # --- MACD ---
    macd_short_period: int = Field(default=12, ge=1)
    macd_long_period: int = Field(default=26, ge=1)
    macd_signal_period: int = Field(default=9, ge=1)

    # --- Stochastics (%K lookback, %D smoothing, slow %D smoothing) ---
    stochastics_n_period: int = Field(default=14, ge=1)
    stochastics_m_period: int = Field(default=3, ge=1)
    stochastics_x_period: int = Field(default=3, ge=1)

    # --- Aroon ---
    aroon_period: int = Field(default=14, ge=1)

    # --- Bollinger Bands ---
    bollinger_period: int = Field(default=20, ge=1)
    bollinger_multiplier: float = Field(default=2.0, ge=0.0)

    # --- Indicator suite ---
    suite_sma_fast_period: int = Field(default=20, ge=1)
    suite_sma_slow_period: int = Field(default=50, ge=1)
    suite_ema_period: int = Field(default=21, ge=1)
    suite_vwma_period: int = Field(default=20, ge=1)

    model_config = {
        "env_prefix": "STREAMIND_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at ``level`` (defaults to ``settings.log_level``)."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


# Singleton settings instance
settings = Settings()
