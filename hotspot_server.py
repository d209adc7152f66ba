#!/usr/bin/env python3
"""Hotspot Widget Server - Entry Point.

This is the thin entry point for the widget server.
All protocol logic is in the hotspot_src.protocol package.

Usage:
    python hotspot_server.py                  # Serve the hotspot catalog on $PORT
    python hotspot_server.py --catalog post   # Serve the post catalog
"""

import argparse
import sys
from pathlib import Path

from hotspot_src import config
from hotspot_src.widget_utils.logging_config import get_logger


def global_exception_handler(exctype, value, tb):
    """Log unhandled exceptions before crashing."""
    logger = get_logger("HotspotServer")
    logger.critical("Unhandled exception", exc_info=(exctype, value, tb))
    sys.__excepthook__(exctype, value, tb)


sys.excepthook = global_exception_handler


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Hotspot Widget Server")
    parser.add_argument(
        "--catalog", type=str, default=config.CATALOG, help="Widget catalog to serve"
    )
    parser.add_argument("--port", type=int, default=config.PORT, help="HTTP server port")
    parser.add_argument("--host", type=str, default=config.HOST, help="HTTP server host")
    parser.add_argument(
        "--assets-dir", type=Path, default=config.ASSETS_DIR, help="Built widget HTML"
    )
    parser.add_argument(
        "--data-dir", type=Path, default=config.DATA_DIR, help="Canned dataset root"
    )
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    args = parser.parse_args()

    from hotspot_src.core.errors import AssetNotFound, RegistryError
    from hotspot_src.protocol import build_registry, setup_process
    from hotspot_src.protocol.transports import run_server

    setup_process(log_level=args.log_level.upper())
    logger = get_logger("HotspotServer")

    # An incomplete catalog is never served
    try:
        registry = build_registry(args.catalog, args.assets_dir, args.data_dir)
    except (AssetNotFound, RegistryError, ValueError) as e:
        logger.critical(f"Cannot build widget registry: {e}")
        sys.exit(1)

    run_server(registry, args.host, args.port)


if __name__ == "__main__":
    main()
