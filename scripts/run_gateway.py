#!/usr/bin/env python3
"""
Run the relay gateway with uvicorn.

  python scripts/run_gateway.py
  python scripts/run_gateway.py --mock --port 8000 --verbose

Host and port default to config/gateway_config.yml (PORT env overrides).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from src.utils.config_loader import load_gateway_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the relay gateway")
    parser.add_argument("--host", default=None, help="Bind address (default from config)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default from config / PORT)")
    parser.add_argument("--mock", action="store_true", help="Use offline mock providers")
    parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    if args.mock:
        os.environ["INTEGRATIONS_MODE"] = "mock"

    cfg = load_gateway_config()
    uvicorn.run(
        "src.api.main:app",
        host=args.host or cfg.server.host,
        port=args.port or cfg.server.port,
        reload=args.reload,
        log_level="debug" if args.verbose else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
