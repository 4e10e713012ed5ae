"""Application entry point for Limbrix."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from app.app import LimbrixApp
from core.config import load_config_dir
from core.logging_config import setup_logging


def main() -> None:
    setup_logging(level=logging.DEBUG if os.environ.get("LIMBRIX_DEBUG") else logging.INFO)

    # A checkout keeps its config next to src/; an installed copy falls back to defaults
    default_dir = Path(__file__).resolve().parents[1] / "config"
    config_dir = Path(os.environ.get("LIMBRIX_CONFIG_DIR", default_dir))
    app_config, pose_feed_config = load_config_dir(config_dir)

    app = LimbrixApp(app_config=app_config, pose_feed_config=pose_feed_config)
    app.run()


if __name__ == "__main__":
    main()
