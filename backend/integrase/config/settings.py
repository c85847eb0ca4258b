"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in TRUTHY


class Config:
    # Directory service (Metro Reviews)
    DIRECTORY_API_URL = os.getenv("DIRECTORY_API_URL", "https://catnip.metrobots.xyz")
    DIRECTORY_TIMEOUT = float(os.getenv("DIRECTORY_TIMEOUT", "20"))

    # List settings, read by load_list_config()
    LIST_ID = os.getenv("INTEGRASE_LIST_ID", "")
    SECRET_KEY = os.getenv("INTEGRASE_SECRET_KEY", "")
    DOMAIN_NAME = os.getenv("INTEGRASE_DOMAIN_NAME", "")
    STARTUP_LOGS = env_flag("INTEGRASE_STARTUP_LOGS", "true")
    REQUEST_LOGS = env_flag("INTEGRASE_REQUEST_LOGS")
    BIND_ADDR = os.getenv("INTEGRASE_BIND_ADDR", "0.0.0.0:5001")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )
