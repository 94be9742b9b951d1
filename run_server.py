"""Entry point for running the FastAPI application with Uvicorn."""
from __future__ import annotations

import logging
import os

import uvicorn

from codercomm.config import get_settings


def main() -> None:
  logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
  settings = get_settings()
  reload = os.getenv("UVICORN_RELOAD", "false").lower() == "true"
  uvicorn.run("codercomm.main:app", host="0.0.0.0", port=settings.port, reload=reload)


if __name__ == "__main__":
  main()
