from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings

from debtcalc.engine.time_units import DayCountConvention


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "DEBTCALC_"}

    # Arithmetic
    decimal_precision: int = Field(50, gt=0)  # Significant digits
    display_places: int = Field(2, ge=0)

    # Day-count convention (30/360)
    days_in_year: Decimal = Field(Decimal("360"), gt=0)
    days_in_month: Decimal = Field(Decimal("30"), gt=0)

    # App
    debug: bool = False
    log_level: str = "INFO"

    def day_count_convention(self) -> DayCountConvention:
        return DayCountConvention(days_in_year=self.days_in_year, days_in_month=self.days_in_month)


settings = Settings()
