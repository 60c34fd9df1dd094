from __future__ import annotations

import os


class Settings:
    # Logging
    LOG_LEVEL: str = os.getenv("COLLECTKIT_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "COLLECTKIT_LOG_FORMAT", "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"
    )
    LOG_DATE_FORMAT: str = os.getenv("COLLECTKIT_LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")


settings = Settings()
