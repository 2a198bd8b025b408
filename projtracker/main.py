"""Main entry point for the project tracker."""

import argparse
import logging
import sys
from dataclasses import replace

from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from projtracker import __version__
from projtracker.config import DatabaseSettings
from projtracker.dao import ProjectsDao
from projtracker.db import create_engine_from_settings
from projtracker.exc import ConfigurationError
from projtracker.schema import create_schema
from projtracker.services import ProjectsService
from projtracker.ui.menu import ProjectsMenu

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.

    Returns:
        The parser

    """
    parser = argparse.ArgumentParser(
        prog="projtracker",
        description="Track DIY projects: materials, steps and categories.",
    )
    parser.add_argument(
        "--database-url",
        help=(
            "SQLAlchemy URL of the projects store; overrides the PROJECTS_DB_* "
            "environment variables"
        ),
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create any missing tables before starting",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages"
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the project tracker menu.

    Args:
        argv: Command line arguments, without the program name

    Returns:
        The process exit status

    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = DatabaseSettings.from_env()
        if args.database_url:
            settings = replace(settings, url=args.database_url)
        engine = create_engine_from_settings(settings, echo=args.verbose)
    except (ConfigurationError, ArgumentError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        if args.create_schema:
            try:
                create_schema(engine)
            except SQLAlchemyError as e:
                logger.exception("Schema creation failed")
                print(f"Error: could not create schema: {e}", file=sys.stderr)
                return 1
        ProjectsMenu(ProjectsService(ProjectsDao(engine))).run()
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
