"""
Command-line entry point: serve the API with uvicorn.

Usage:
    python -m person_registry --host 0.0.0.0 --port 8000
"""

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from person_registry.core.config import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="person_registry",
        description="Serve the person registry REST API.",
    )
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and run the ASGI server until interrupted."""
    args = build_parser().parse_args(argv)
    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("person_registry.main:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
