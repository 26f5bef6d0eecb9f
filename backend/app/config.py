"""Application settings and validation."""

import os
from pathlib import Path

DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "seed.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    ENV: str
    LOG_LEVEL: str
    SEED_ON_STARTUP: bool
    SEED_FILE: Path
    ALLOW_DEV_CORS: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"
        self.SEED_FILE = Path(os.getenv("SEED_FILE", str(DEFAULT_SEED_FILE))).expanduser()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self._validate()

    def _validate(self):
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise RuntimeError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.LOG_LEVEL!r}")
        if self.SEED_ON_STARTUP and not self.SEED_FILE.is_file():
            raise RuntimeError(f"SEED_FILE not found at {self.SEED_FILE}")


settings = Settings()
