from typing import List

from pydantic_settings import BaseSettings

from .engine.models import CalculationBasis


class Settings(BaseSettings):
    APP_NAME: str = "downtime-cost-calculator"
    LOG_LEVEL: str = "INFO"

    # Display
    CURRENCY_SYMBOL: str = "$"

    # Basis used when a request or form leaves calculationBasis empty
    DEFAULT_CALCULATION_BASIS: CalculationBasis = CalculationBasis.ALWAYS_ON

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
