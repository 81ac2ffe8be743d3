from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://127.0.0.1:5173"
    LOG_LEVEL: str = "INFO"

    # Default work rules, used when a request does not carry its own WorkSettings
    DEFAULT_STANDARD_DAY_HOURS: float = 6
    DEFAULT_NIGHT_START_HOUR: int = 22
    DEFAULT_NIGHT_END_HOUR: int = 6
    DEFAULT_TREAT_HOLIDAY_AS_OVERTIME: bool = True
    DEFAULT_DEDUCT_AUTO_BREAK: bool = False
    DEFAULT_AUTO_BREAK_THRESHOLD_HOURS: float = 6
    DEFAULT_AUTO_BREAK_MINUTES: int = 30

    # Meal vouchers: one voucher per day once this much work is reached,
    # sessions may be joined across breaks up to MEAL_VOUCHER_MAX_BREAK_HOURS
    MEAL_VOUCHER_MIN_HOURS: float = 7
    MEAL_VOUCHER_MAX_BREAK_HOURS: float = 2

    # Reminders are planned in this zone
    REMINDER_TIMEZONE: str = "Europe/Rome"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
