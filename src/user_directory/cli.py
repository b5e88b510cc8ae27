"""
user_directory.cli
~~~~~~~~~~~~~~~~~~
``user-directory`` — command-line consumer of the user service.

Commands
--------
    user-directory list [--format json|table]    Print every user
    user-directory config                        Print a starter USER_DIRECTORY block

Outside a Django project the built-in defaults are used. Inside one, point
``DJANGO_SETTINGS_MODULE`` at your settings and the ``USER_DIRECTORY`` block
is honoured.
"""

import argparse
import copy
import json
import logging.config
import sys
import textwrap

from user_directory.logging_structured import DEFAULT_LOGGING


SETTINGS_BLOCK = textwrap.dedent("""\
    # ── User Directory ────────────────────────────────────────────────────────
    INSTALLED_APPS += ["user_directory"]

    USER_DIRECTORY = {
        # Any user_directory.repositories.UserRepository subclass
        "REPOSITORY": "user_directory.repositories.InMemoryUserRepository",
        # Seed records; None serves the built-in Alice and Bob
        "USERS": None,
    }
    # ─────────────────────────────────────────────────────────────────────────
""")


def _configure_django() -> None:
    from django.conf import settings
    if not settings.configured:
        settings.configure()


def _configure_logging(verbose: bool) -> None:
    cfg = copy.deepcopy(DEFAULT_LOGGING)
    if verbose:
        cfg["handlers"]["console"]["formatter"] = "verbose"
        cfg["loggers"]["user_directory"]["level"] = "DEBUG"
    else:
        cfg["loggers"]["user_directory"]["level"] = "WARNING"
    logging.config.dictConfig(cfg)


def _render_table(rows: list[dict]) -> str:
    headers = ("id", "name", "email")
    widths = [
        max([len(h)] + [len(str(row[h])) for row in rows])
        for h in headers
    ]
    lines = ["  ".join(h.ljust(w) for h, w in zip(headers, widths))]
    lines.append("  ".join("-" * w for w in widths))
    for row in rows:
        lines.append("  ".join(str(row[h]).ljust(w) for h, w in zip(headers, widths)))
    return "\n".join(lines)


# ── Commands ───────────────────────────────────────────────────────────────

def cmd_list(fmt: str) -> int:
    from user_directory.bootstrap import build_user_service
    from user_directory.conf import directory_settings

    _configure_django()
    directory_settings.validate()
    rows = [user.model_dump() for user in build_user_service().get_all()]

    if fmt == "table":
        print(_render_table(rows))
    else:
        print(json.dumps(rows, indent=2))
    return 0


def cmd_config() -> int:
    print("\n  Add to your settings.py:\n")
    print(SETTINGS_BLOCK)
    return 0


# ── Entrypoint ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="user-directory",
        description="Read-only user directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log wiring details to stderr")
    subs = parser.add_subparsers(dest="command", required=True)

    p = subs.add_parser("list", help="Print every user")
    p.add_argument("--format", choices=("json", "table"), default="json")

    subs.add_parser("config", help="Print starter USER_DIRECTORY settings block")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "list":
        return cmd_list(args.format)
    return cmd_config()


if __name__ == "__main__":
    sys.exit(main())
