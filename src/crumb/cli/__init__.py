"""Crumb CLI — inspect and rewrite a cookie jar string from the shell.

Entry point registered as ``crumb`` in ``pyproject.toml``::

    [project.scripts]
    crumb = "crumb.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``crumb`` command."""
    parser = argparse.ArgumentParser(
        prog="crumb",
        description="Crumb — read and write cookies in a jar string.",
    )
    parser.add_argument(
        "--jar",
        default=None,
        help="Jar string to operate on (default: $CRUMB_JAR)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- crumb read -------------------------------------------------------
    read_parser = subparsers.add_parser("read", help="Print a cookie's value")
    read_parser.add_argument("key", help="Cookie name")

    # -- crumb has --------------------------------------------------------
    has_parser = subparsers.add_parser("has", help="Check whether a cookie is present")
    has_parser.add_argument("key", help="Cookie name")

    # -- crumb keys -------------------------------------------------------
    subparsers.add_parser("keys", help="List cookie names")

    # -- crumb write ------------------------------------------------------
    write_parser = subparsers.add_parser("write", help="Compile and commit a cookie")
    write_parser.add_argument("key", help="Cookie name")
    write_parser.add_argument("value", help="Cookie value")
    write_parser.add_argument("--path", default=None, help="Path scope")
    write_parser.add_argument("--domain", default=None, help="Domain scope")
    write_parser.add_argument("--max-age", type=int, default=None, help="Lifetime in seconds")
    write_parser.add_argument(
        "--expires",
        default=None,
        help="Expiry: epoch milliseconds, 'never', or a pre-formatted date",
    )
    write_parser.add_argument("--secure", action="store_true", help="Set the secure flag")

    # -- crumb delete -----------------------------------------------------
    delete_parser = subparsers.add_parser("delete", help="Expire a cookie")
    delete_parser.add_argument("key", help="Cookie name")
    delete_parser.add_argument("--path", default=None, help="Path scope used on write")
    delete_parser.add_argument("--domain", default=None, help="Domain scope used on write")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from crumb.cli._commands import run_command

    run_command(args)
