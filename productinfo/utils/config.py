"""
Configuration utilities.
"""
import os
from dataclasses import dataclass
from typing import Optional

import dotenv

dotenv.load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the product info clients and API."""
    aws_profile: Optional[str] = None
    pricing_region: str = "us-east-1"
    partition: str = "aws"
    connect_timeout: float = 10.0
    read_timeout: float = 60.0
    max_attempts: int = 1
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8002


def _get_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} environment variable must be a number, got {raw!r}")


def get_settings() -> Settings:
    """
    Build the settings from environment variables.

    Returns:
        Settings: The current settings

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    return Settings(
        aws_profile=os.getenv("AWS_PROFILE") or None,
        pricing_region=os.getenv("PRODUCTINFO_PRICING_REGION", "us-east-1"),
        partition=os.getenv("PRODUCTINFO_PARTITION", "aws"),
        connect_timeout=_get_number("PRODUCTINFO_CONNECT_TIMEOUT", 10.0, float),
        read_timeout=_get_number("PRODUCTINFO_READ_TIMEOUT", 60.0, float),
        max_attempts=_get_number("PRODUCTINFO_MAX_ATTEMPTS", 1, int),
        log_level=os.getenv("PRODUCTINFO_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("PRODUCTINFO_HOST", "0.0.0.0"),
        port=_get_number("PRODUCTINFO_PORT", 8002, int),
    )
