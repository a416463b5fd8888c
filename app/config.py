"""
Service configuration.

Values are read from environment variables once, when this module is
imported, so set them before starting the server.
"""

import os
from dataclasses import dataclass

DEFAULT_SEED_URL = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"


@dataclass
class Settings:
    project_name: str = os.getenv("PROJECT_NAME", "Sales Transactions API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path; logs also go to this file when set.
    log_file: str = os.getenv("LOG_FILE", "")

    # Remote JSON array used by POST /api/init.
    seed_url: str = os.getenv("SEED_URL", DEFAULT_SEED_URL)
    seed_timeout: float = float(os.getenv("SEED_TIMEOUT", "30"))

    # Startup seeding: "none", "sample" (offline generator) or "remote".
    auto_seed: str = os.getenv("AUTO_SEED", "none").lower()


settings = Settings()
