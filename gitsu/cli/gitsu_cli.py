"""CLI for managing git user profiles.

Run with: python -m gitsu --help
"""

import argparse
import dataclasses
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, TextIO

from gitsu import __version__
from gitsu.clients.git import GitConfigApplier, IdentityApplier
from gitsu.config import Config, get_config
from gitsu.errors import GitsuError
from gitsu.store import ProfileStore

logger = logging.getLogger(__name__)


class Command(str, Enum):
    """The closed set of gitsu sub-commands."""

    CREATE = "create"
    LIST = "list"
    SU = "su"
    DELETE = "delete"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-parser per Command."""
    parser = argparse.ArgumentParser(prog="gitsu", description="Git User management")
    parser.add_argument("--db", type=Path, help="Path to the profile database")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    create = sub.add_parser(Command.CREATE.value, help="Create a new git user")
    create.add_argument("name", help="git user name")
    create.add_argument("email", help="git user email")

    sub.add_parser(Command.LIST.value, help="List users")

    su = sub.add_parser(Command.SU.value, help="Switch user for current git dir")
    su.add_argument("name", help="git user name")

    delete = sub.add_parser(Command.DELETE.value, help="Delete an existing git user from db")
    delete.add_argument("name", help="git user name")

    return parser


# === Command handlers ===


def _create(args: argparse.Namespace, store: ProfileStore, applier: IdentityApplier, out: TextIO) -> int:
    profile = store.create_profile(args.name, args.email)
    print(f"create user success: {profile}", file=out)
    return 0


def _list(args: argparse.Namespace, store: ProfileStore, applier: IdentityApplier, out: TextIO) -> int:
    profiles = store.list_profiles()
    print("Users:", file=out)
    for profile in profiles:
        print(f"- {profile}", file=out)
    return 0


def _su(args: argparse.Namespace, store: ProfileStore, applier: IdentityApplier, out: TextIO) -> int:
    profile = store.find_profile(args.name)
    applier.apply_identity(profile.name, profile.email)
    print(f"user switched: {profile}", file=out)
    return 0


def _delete(args: argparse.Namespace, store: ProfileStore, applier: IdentityApplier, out: TextIO) -> int:
    # A missing profile is reported, not treated as an error
    if store.delete_profile(args.name):
        print(f"user deleted: {args.name}", file=out)
    else:
        print(f"user not found: {args.name}", file=out)
    return 0


Handler = Callable[[argparse.Namespace, ProfileStore, IdentityApplier, TextIO], int]

HANDLERS: dict[Command, Handler] = {
    Command.CREATE: _create,
    Command.LIST: _list,
    Command.SU: _su,
    Command.DELETE: _delete,
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(
    argv: list[str],
    config: Config | None = None,
    applier: IdentityApplier | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Parse argv, execute one command and return the process exit code.

    Args:
        argv: Command-line arguments without the program name.
        config: Configuration; defaults to get_config().
        applier: Identity applier; defaults to a GitConfigApplier.
        out: Stream for normal output (default stdout).
        err: Stream for error messages (default stderr).

    Returns:
        0 on success, 1 if the command failed.
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    args = build_parser().parse_args(argv)
    config = config or get_config()
    if args.db is not None:
        config = dataclasses.replace(config, db_path=args.db.expanduser())

    _configure_logging("DEBUG" if args.verbose else config.log_level)

    command = Command(args.command)
    if applier is None:
        applier = GitConfigApplier(git_binary=config.git_binary)

    try:
        with ProfileStore.open(config.db_path) as store:
            logger.debug("Running %s with %d stored profiles", command.value, store.count())
            return HANDLERS[command](args, store, applier, out)
    except GitsuError as e:
        print(f"Error: {e}", file=err)
        return 1


def main() -> None:
    """CLI entry point."""
    raise SystemExit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
