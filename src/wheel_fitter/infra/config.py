from __future__ import annotations

import os

DEFAULT_IMAGE_FETCH_TIMEOUT_SECONDS = 10.0


def cors_allow_origins() -> list[str]:
    """Origins allowed by CORS; "*" unless CORS_ALLOW_ORIGINS lists specific ones."""
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def image_fetch_timeout_seconds() -> float:
    raw = os.getenv("IMAGE_FETCH_TIMEOUT_SECONDS")

    if not raw:
        return DEFAULT_IMAGE_FETCH_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"IMAGE_FETCH_TIMEOUT_SECONDS must be a number, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("IMAGE_FETCH_TIMEOUT_SECONDS must be > 0")

    return timeout


def server_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def server_port() -> int:
    raw = os.getenv("PORT", "3000")

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {raw!r}")
