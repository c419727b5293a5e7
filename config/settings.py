"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Input
    data_csv_path: str = "data/data.csv"
    strict_parsing: bool = False  # raise on the first malformed row instead of quarantining

    # Ranked lists
    top_sub_region_limit: int = 12
    region_bar_limit: int = 10
    alert_limit: int = 5
    recommendation_limit: int = 4

    # Trend chart
    trend_window: int = 6  # most recent periods shown


settings = Settings()
