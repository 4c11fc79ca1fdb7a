# src/relocation/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Evaluation policy defaults
    # -----------------------------
    CLOSING_COST_PCT: float = Field(default=0.03)

    # Used when no loan product qualifies for the chosen down payment
    DEFAULT_INTEREST_RATE: float = Field(default=0.065)

    # Used for DTI when a scenario carries no borrower
    DEFAULT_MONTHLY_INCOME: float = Field(default=5000.0)

    # Mortgage insurance is only charged below this down payment
    INSURANCE_WAIVER_DOWN_PAYMENT: float = Field(default=0.20)

    MORTGAGE_TERM_YEARS: int = Field(default=30)
    MAX_DTI_PCT: float = Field(default=43.0)

    # -----------------------------
    # Analysis defaults
    # -----------------------------
    ANALYSIS_YEARS: int = Field(default=5)
    STOCK_RETURN_RATE: float = Field(default=0.06)

    model_config = SettingsConfigDict(
        env_prefix="RELOCATION_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "CLOSING_COST_PCT",
        "DEFAULT_INTEREST_RATE",
        "INSURANCE_WAIVER_DOWN_PAYMENT",
        "STOCK_RETURN_RATE",
        mode="before",
    )
    @classmethod
    def _to_non_negative_fraction(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("rate must be numeric or percent-like") from err
        if f > 1.0:
            f = f / 100.0
        if f < 0:
            raise ValueError("rate must be non-negative")
        return f

    @field_validator("DEFAULT_MONTHLY_INCOME", "MAX_DTI_PCT", mode="before")
    @classmethod
    def _positive(cls, v: Any) -> Any:
        f = float(v)
        if f <= 0:
            raise ValueError("value must be > 0")
        return f

    @field_validator("MORTGAGE_TERM_YEARS", "ANALYSIS_YEARS", mode="before")
    @classmethod
    def _positive_years(cls, v: Any) -> Any:
        n = int(v)
        if n <= 0:
            raise ValueError("years must be > 0")
        return n


config = AppConfig()
