"""
Main entry point for a standalone integrase server.
Serves the in-memory reference adapter with the list settings from the
environment (or a .env file).

Usage:
    INTEGRASE_LIST_ID=... INTEGRASE_SECRET_KEY=... python run_fastapi.py
"""

import io
import os
import sys

# Set UTF-8 encoding for stdout/stderr to handle Unicode characters on Windows
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(
        sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )
    sys.stderr = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )

os.environ["PYTHONIOENCODING"] = "utf-8"

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from integrase.adapters.memory import MemoryListAdapter
from integrase.config.logging_config import setup_logging
from integrase.config.settings import Config
from integrase.domain.entities import load_list_config
from integrase.fastapi_app import create_fastapi_app


def split_bind_addr(bind_addr: str) -> tuple[str, int]:
    host, _, port = (bind_addr or "0.0.0.0:5001").rpartition(":")
    return host or "0.0.0.0", int(port or 5001)


if __name__ == "__main__":
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    config = load_list_config()
    app = create_fastapi_app(MemoryListAdapter(config))
    host, port = split_bind_addr(config.bind_addr)

    print(f"Server running on http://{host}:{port}")

    uvicorn.run(app, host=host, port=port, log_level="info")
