#!/usr/bin/env python3
"""
API Server Startup Script
Starts the DrivewayDash API with uvicorn.

Usage:
    python scripts/run_server.py                     # Host/port from settings
    python scripts/run_server.py --port 8000
    python scripts/run_server.py --reload            # Auto-reload for development
"""

import argparse
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.core.config import settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the DrivewayDash API server")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    level = args.log_level.upper()

    # Configure logging
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    logger = logging.getLogger("drivewaydash.server")
    logger.info(f"Server running on http://{args.host}:{args.port}")

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=level.lower(),
    )


if __name__ == "__main__":
    main()
