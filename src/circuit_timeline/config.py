"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the circuits API location and credentials from the environment
(including a check that `CIRCUIT_API_URL` is present).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        api_url: Base URL of the circuits API (no trailing slash).
        api_token: Optional bearer token sent with API requests.
        request_timeout: Per-request timeout in seconds.
    """
    api_url: str
    api_token: str | None
    request_timeout: float


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `CIRCUIT_API_URL` is not set or
            `CIRCUIT_API_TIMEOUT` is not a positive number.
    """
    api_url = os.getenv("CIRCUIT_API_URL", "").strip().rstrip("/")
    api_token = os.getenv("CIRCUIT_API_TOKEN", "").strip() or None
    raw_timeout = os.getenv("CIRCUIT_API_TIMEOUT", str(DEFAULT_TIMEOUT))

    if not api_url:
        raise RuntimeError(
            "CIRCUIT_API_URL is required. Set it in .env "
            "(example: 'https://circuits.example.com/api')."
        )

    try:
        request_timeout = float(raw_timeout)
    except ValueError:
        raise RuntimeError(f"CIRCUIT_API_TIMEOUT must be a number, got {raw_timeout!r}") from None
    if request_timeout <= 0:
        raise RuntimeError(f"CIRCUIT_API_TIMEOUT must be positive, got {raw_timeout!r}")

    return Settings(
        api_url=api_url,
        api_token=api_token,
        request_timeout=request_timeout,
    )
