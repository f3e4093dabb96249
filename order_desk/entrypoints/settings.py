from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_desk.domain.business_days import HolidayRecurrence, HolidaySet


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # JSON list in the environment, e.g. HOLIDAYS='["01-01", "12-25"]'
    HOLIDAYS: list[str] = ["01-01", "12-25"]
    HOLIDAY_RECURRENCE: HolidayRecurrence = HolidayRecurrence.yearly
    RECENT_WINDOW_HOURS: int = Field(default=24, gt=0)

    LOG_LEVEL: str = "INFO"
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    SEED_DEMO_ORDERS: bool = False

    def holiday_set(self) -> HolidaySet:
        return HolidaySet.from_strings(self.HOLIDAYS, self.HOLIDAY_RECURRENCE)


config = Config()
