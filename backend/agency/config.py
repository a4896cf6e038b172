from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Forms
    default_currency: str = "USD"

    # Rates
    best_rate_alternatives: int = 3
    rate_total_tolerance: float = 0.01  # stored vs computed total_rate

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
