"""CLI commands for the podcast catalog.

Provides commands for:
- Creating the database tables
- Registering accounts and logging in
- Listing and adding podcasts
- Listing the episodes of a podcast
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from ..config import Config
from ..db.factory import create_database
from ..db.models import UserRole
from ..schemas import CreateAccountInput, CreatePodcastInput, LoginInput
from ..services import CoreOutput, Services, create_services

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _report_failure(result: CoreOutput) -> int:
    print(f"Error: {result.error}")
    return 1


def init_db(args, config: Config) -> int:
    """Create any missing tables in the configured database."""
    database = create_database(
        database_url=config.DATABASE_URL,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        echo=config.DB_ECHO,
        create_tables=True,
    )
    database.close()
    print("Database tables created")
    return 0


def create_account(args, services: Services) -> int:
    result = services.users.create_account(
        CreateAccountInput(email=args.email, password=args.password, role=UserRole(args.role))
    )
    if not result.ok:
        return _report_failure(result)
    print(f"Created account: {args.email}")
    return 0


def login(args, services: Services) -> int:
    result = services.users.login(LoginInput(email=args.email, password=args.password))
    if not result.ok:
        return _report_failure(result)
    print(result.token)
    return 0


def list_podcasts(args, services: Services) -> int:
    result = services.podcasts.get_all_podcasts()
    if not result.ok:
        return _report_failure(result)

    if not result.podcasts:
        print("No podcasts found")
        return 0

    print(f"\n{'ID':<6} {'Title':<40} {'Category':<20} {'Rating':<6}")
    print("-" * 75)
    for podcast in result.podcasts:
        title = (podcast.title or "Unknown")[:38]
        rating = podcast.rating if podcast.rating is not None else "-"
        print(f"{podcast.id:<6} {title:<40} {podcast.category[:18]:<20} {rating:<6}")
    print(f"\nTotal: {len(result.podcasts)} podcasts")
    return 0


def add_podcast(args, services: Services) -> int:
    result = services.podcasts.create_podcast(
        CreatePodcastInput(title=args.title, category=args.category)
    )
    if not result.ok:
        return _report_failure(result)
    print(f"Added podcast: {args.title}")
    print(f"  ID: {result.id}")
    return 0


def list_episodes(args, services: Services) -> int:
    result = services.podcasts.get_episodes(args.podcast_id)
    if not result.ok:
        return _report_failure(result)

    for episode in result.episodes:
        print(f"  [{episode.id}] {episode.title} ({episode.category})")
    print(f"\nTotal: {len(result.episodes)} episodes")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Podcast catalog CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        help="Path to .env file",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        help="Override LOG_LEVEL from the environment",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Create database tables")

    account_parser = subparsers.add_parser("create-account", help="Register a new account")
    account_parser.add_argument("email", help="Account email")
    account_parser.add_argument("password", help="Account password")
    account_parser.add_argument(
        "--role",
        choices=[role.value for role in UserRole],
        default=UserRole.LISTENER.value,
        help="Account role (default: Listener)",
    )

    login_parser = subparsers.add_parser("login", help="Log in and print a token")
    login_parser.add_argument("email", help="Account email")
    login_parser.add_argument("password", help="Account password")

    subparsers.add_parser("list-podcasts", help="List podcasts")

    add_parser = subparsers.add_parser("add-podcast", help="Add a podcast")
    add_parser.add_argument("title", help="Podcast title")
    add_parser.add_argument("category", help="Podcast category")

    episodes_parser = subparsers.add_parser("list-episodes", help="List episodes of a podcast")
    episodes_parser.add_argument("podcast_id", type=int, help="Podcast ID")

    return parser


SERVICE_COMMANDS = {
    "create-account": create_account,
    "login": login,
    "list-podcasts": list_podcasts,
    "add-podcast": add_podcast,
    "list-episodes": list_episodes,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = Config(env_file=args.env_file)
    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1

    logging.basicConfig(level=args.log_level or config.LOG_LEVEL, format=LOG_FORMAT)

    if args.command == "init-db":
        return init_db(args, config)

    command_func = SERVICE_COMMANDS.get(args.command)
    if command_func is None:
        parser.print_help()
        return 1

    try:
        services = create_services(config)
    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1

    try:
        return command_func(args, services)
    except ValidationError as e:
        print(f"Invalid input: {e}")
        return 1
    finally:
        services.close()


if __name__ == "__main__":
    sys.exit(main())
