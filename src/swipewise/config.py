from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    card_file: str = "data/cards/sample_cards.json"
    log_level: str = "INFO"

    classifier_cache_size: int = 1000
    code_confidence_threshold: float = 0.9
    keyword_confidence_threshold: float = 0.7
    external_hint_max_confidence: float = 0.6

    due_soon_days: int = 7
    min_same_month_grace_days: int = 5
    upcoming_payment_window_days: int = 30
    default_interest_amount: float = 1000.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
