"""Teampulse CLI entry point."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

env_file = Path(__file__).parent.parent / ".env"
load_dotenv(env_file)

from teampulse import __version__
from teampulse.config import get_settings
from teampulse.leaderboard import (
    LeaderboardGenerator,
    LeaderboardError,
    LeaderboardResponse,
    SortConfig,
    SortDirection,
    SortField,
    TimeFilter,
    sort_entries,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """# Teampulse Configuration
# Synthetic roster and generation defaults for the leaderboard.

roster:
  email_domain: company.com
  min_members: 12
  max_members: 14
  min_member_multiplier: 0.3
  max_member_multiplier: 2.0

generator:
  default_time_filter: 7d
  seed: null
"""


def _init_logfire() -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from teampulse.observability import initialize_logfire

        initialize_logfire(get_settings())
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def cmd_init(args: argparse.Namespace) -> int:
    """Create the data directory and a config template."""
    try:
        data_dir = get_settings().data_dir
        data_dir.mkdir(parents=True, exist_ok=True)

        config_path = data_dir / "config.yaml"
        if not config_path.exists():
            config_path.write_text(CONFIG_TEMPLATE)
            logger.info(f"Created config template: {config_path}")
        else:
            logger.info(f"Config file already exists: {config_path}")

        print(f"\n✓ Data directory initialized at {data_dir}\n")
        return 0

    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\n❌ Initialization failed: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== Teampulse Configuration ===\n")
        print(f"Data Directory: {settings.data_dir}")
        print(f"Environment: {settings.environment}\n")

        roster = settings.roster
        print("Roster:")
        print(f"  Members Available: {len(roster.member_names)}")
        print(f"  Owner: {roster.member_names[0]}")
        print(f"  Email Domain: {roster.email_domain}")
        print(f"  Roster Size: {roster.min_members}-{roster.max_members}")
        print(
            f"  Member Multiplier: "
            f"{roster.min_member_multiplier}-{roster.max_member_multiplier}\n"
        )

        print("Generator:")
        print(f"  Default Time Filter: {settings.generator.default_time_filter.value}")
        seed = settings.generator.seed
        print(f"  Seed: {seed if seed is not None else 'random'}\n")

        print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")
        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"\n❌ Failed to load configuration: {e}\n")
        return 1


def format_leaderboard(response: LeaderboardResponse, sort: SortConfig) -> str:
    """Render a leaderboard as a fixed-width text table."""
    period = response.period
    lines = [
        f"Period: {period.start:%Y-%m-%d} -> {period.end:%Y-%m-%d} "
        f"({response.total_members} members)",
        "",
        f"{'Rank':>4}  {'Name':<16} {'Role':<6} {'Score':>9} "
        f"{'Lines+':>7} {'Accepts':>7} {'Applies':>7} {'Chat':>6} {'Composer':>8}",
    ]
    for entry in sort_entries(response.entries, sort):
        m = entry.metrics
        lines.append(
            f"{entry.rank:>4}  {entry.name:<16} {entry.role:<6} {entry.activity_score:>9.1f} "
            f"{m.total_lines_added:>7} {m.total_accepts:>7} {m.total_applies:>7} "
            f"{m.chat_requests:>6} {m.composer_requests:>8}"
        )
    return "\n".join(lines)


def cmd_leaderboard(args: argparse.Namespace) -> int:
    """Generate and print a synthetic leaderboard."""
    _init_logfire()

    try:
        if args.debug:
            logging.getLogger().setLevel(logging.DEBUG)

        settings = get_settings()
        time_filter = args.filter or settings.generator.default_time_filter
        seed = args.seed if args.seed is not None else settings.generator.seed

        if seed is not None:
            generator = LeaderboardGenerator.seeded(seed, roster=settings.roster)
        else:
            generator = LeaderboardGenerator(roster=settings.roster)

        response = generator.generate(time_filter)

        if args.json:
            print(response.model_dump_json(by_alias=True, indent=2))
            return 0

        sort = SortConfig(field=args.sort_by, direction=args.sort_order)
        print(f"\n=== Team Leaderboard ({TimeFilter(time_filter).value}) ===\n")
        print(format_leaderboard(response, sort))
        print()
        return 0

    except LeaderboardError as e:
        logger.error(f"Invalid leaderboard request: {e}")
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Leaderboard generation failed: {e}", exc_info=True)
        print(f"\n❌ Leaderboard generation failed: {e}\n")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Teampulse: synthetic team usage leaderboard generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Teampulse {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser(
        "init",
        help="Initialize data directory and configuration file",
    )
    parser_init.set_defaults(func=cmd_init)

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_leaderboard = subparsers.add_parser(
        "leaderboard",
        help="Generate a synthetic team leaderboard",
    )
    parser_leaderboard.add_argument(
        "--filter",
        choices=[f.value for f in TimeFilter],
        help="Time window (default: configured default, 7d)",
    )
    parser_leaderboard.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible output",
    )
    parser_leaderboard.add_argument(
        "--sort-by",
        choices=[f.value for f in SortField],
        default=SortField.RANK.value,
        help="Table column to order by (default: rank)",
    )
    parser_leaderboard.add_argument(
        "--sort-order",
        choices=[d.value for d in SortDirection],
        default=SortDirection.ASC.value,
        help="Sort direction (default: asc)",
    )
    parser_leaderboard.add_argument(
        "--json",
        action="store_true",
        help="Print the camelCase JSON response instead of a table",
    )
    parser_leaderboard.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser_leaderboard.set_defaults(func=cmd_leaderboard)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
