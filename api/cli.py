#!/usr/bin/env python3
"""CLI for Geometry API management tasks.

Usage:
    python -m cli <command>

Commands:
    create-tables  Create shape tables from the ORM models
    serve          Run the API with uvicorn
"""

import argparse
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def _create_tables() -> None:
    from core.database import create_engine, create_tables, dispose_engine

    engine = create_engine()
    try:
        await create_tables(engine)
    finally:
        await dispose_engine(engine)


def cmd_create_tables() -> int:
    """Create database tables. Existing tables are left unchanged."""
    logger.info("Creating database tables...")
    asyncio.run(_create_tables())
    logger.info("Tables created")
    return 0


def cmd_serve(host: str, port: int, reload: bool) -> int:
    """Run the API server."""
    import uvicorn

    uvicorn.run("main:app", host=host, port=port, reload=reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Geometry API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "create-tables",
        help="Create shape tables from the ORM models",
    )
    serve = subparsers.add_parser("serve", help="Run the API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "create-tables":
        return cmd_create_tables()
    elif args.command == "serve":
        return cmd_serve(args.host, args.port, args.reload)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
