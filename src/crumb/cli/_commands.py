"""Subcommand handlers for the ``crumb`` CLI.

Each run builds a ``MemoryJar`` from ``--jar`` (or ``$CRUMB_JAR``),
applies one codec operation, and prints the result.
"""

import argparse
import math
import os
import sys

from crumb.codec import CookieCodec
from crumb.dates import Expires, Never, coerce_expires
from crumb.errors import EnvironmentUnavailable, InvalidAttribute, InvalidKey
from crumb.jar import MemoryJar


def _resolve_jar(args: argparse.Namespace) -> MemoryJar:
    raw = args.jar if args.jar is not None else os.environ.get("CRUMB_JAR")
    if raw is None:
        raise EnvironmentUnavailable("No jar given: pass --jar or set CRUMB_JAR")
    return MemoryJar(raw)


def _parse_expires(text: str | None) -> Expires | None:
    if text is None:
        return None
    if text.lower() == "never":
        return Never()
    try:
        millis = float(text)
    except ValueError:
        return coerce_expires(text)
    if math.isnan(millis):
        return coerce_expires(text)
    return coerce_expires(millis)


def run_command(args: argparse.Namespace) -> None:
    """Dispatch ``args.command`` against the resolved jar.

    Exits 1 when no jar is available or a lookup comes back empty,
    2 when the key or an attribute is invalid.
    """
    try:
        codec = CookieCodec(_resolve_jar(args))
    except EnvironmentUnavailable as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        if args.command == "read":
            value = codec.read(args.key)
            if value is None:
                raise SystemExit(1)
            print(value)
        elif args.command == "has":
            found = codec.has(args.key)
            print("true" if found else "false")
            if not found:
                raise SystemExit(1)
        elif args.command == "keys":
            for key in codec.keys():
                print(key)
        elif args.command == "write":
            print(
                codec.write(
                    args.key,
                    args.value,
                    path=args.path,
                    domain=args.domain,
                    max_age=args.max_age,
                    expires=_parse_expires(args.expires),
                    secure=args.secure or None,
                )
            )
        elif args.command == "delete":
            print(codec.delete(args.key, path=args.path, domain=args.domain))
    except (InvalidKey, InvalidAttribute) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
