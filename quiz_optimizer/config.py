# quiz_optimizer/config.py

from pathlib import Path
import logging
import sys

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from pythonjsonlogger.json import JsonFormatter

load_dotenv()

# Custom JSON formatter that excludes null/None fields
class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that only includes fields with non-None values."""

    def add_fields(self, log_record, record, message_dict):
        """Override to filter out None values before adding to JSON output."""
        super().add_fields(log_record, record, message_dict)

        # Remove keys with None values
        log_record_copy = dict(log_record)
        for key, value in log_record_copy.items():
            if value is None:
                del log_record[key]

def setup_json_logging(log_level: int = logging.INFO) -> None:
    """Initialize JSON logging configuration for the application."""
    handler = logging.StreamHandler(sys.stdout)

    # JSON formatter with the structured fields used across the optimizer
    formatter = CustomJsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(quiz_id)s %(item_count)s %(capacity)s %(cells)s "
        "%(selected_count)s %(total_value)s %(total_weight)s "
        "%(count)s %(reason)s"
    )

    handler.setFormatter(formatter)

    root_logger = logging.getLogger("quiz_optimizer")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers = []

    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate logs
    root_logger.propagate = False


BASE_DIR = Path(__file__).resolve().parent.parent  # project root folder


class Settings(BaseSettings):
    # App
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'quiz_optimizer.db'}"

    # Optimizer guards (the DP table is (n + 1) x (capacity + 1) cells)
    OPTIMIZER_MAX_CAPACITY: int = 10_000  # minutes
    OPTIMIZER_MAX_TABLE_CELLS: int = 5_000_000
    # Zero-time questions are rejected unless explicitly allowed
    OPTIMIZER_ALLOW_FREE_ITEMS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @field_validator("OPTIMIZER_MAX_CAPACITY", "OPTIMIZER_MAX_TABLE_CELLS")
    @classmethod
    def validate_positive_ceiling(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Optimizer ceilings must be positive integers")
        return v


settings = Settings()
