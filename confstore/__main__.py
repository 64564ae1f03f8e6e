"""Command line entry point for inspecting application config files."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from . import ConfigStore, StoreError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="confstore", description="Inspect per-user configuration files."
    )
    parser.add_argument(
        "--app",
        default=os.getenv("CONFSTORE_APP"),
        help="Application name (defaults to $CONFSTORE_APP).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("dir", help="Print the application config directory.")
    commands.add_parser("formats", help="List registered file extensions.")
    path_cmd = commands.add_parser("path", help="Print the absolute path of a config file.")
    path_cmd.add_argument("relative_path")
    show_cmd = commands.add_parser(
        "show", help="Print a config file as JSON, creating it when missing."
    )
    show_cmd.add_argument("relative_path")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.app:
        parser.error("--app is required when CONFSTORE_APP is not set.")

    try:
        store = ConfigStore(args.app)
        if args.command == "dir":
            print(store.app_dir())
        elif args.command == "formats":
            for extension in store.registry.extensions():
                print(extension)
        elif args.command == "path":
            print(store.path(args.relative_path))
        else:
            settings = store.load(args.relative_path, dict)
            json.dump(settings, sys.stdout, indent=2, default=str)
            sys.stdout.write("\n")
    except (StoreError, OSError) as exc:
        print(f"confstore: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover
    main()
