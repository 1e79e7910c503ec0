import logging
import os

from dotenv import load_dotenv

load_dotenv()

TRUTHY = ("1", "true", "yes", "on")


class Settings:
    """Logging knobs read from the environment (or a .env file)."""

    def __init__(self) -> None:
        self.log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        # per-subscription and per-emit DEBUG lines from signalhub.core.hub
        self.trace_dispatch = os.environ.get("SIGNALHUB_TRACE", "").strip().lower() in TRUTHY

    def validate(self) -> dict:
        """Validate configuration and return any errors."""
        errors = {}

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors["log_level"] = (
                f"Unknown LOG_LEVEL '{self.log_level}' (expected DEBUG, INFO, WARNING, ERROR or CRITICAL)"
            )

        return errors


settings = Settings()
