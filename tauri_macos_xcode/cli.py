#!/usr/bin/env python3
"""tauri-macos-xcode CLI - Generate Xcode projects for macOS Tauri apps."""

import argparse
import sys

from . import __version__
from .dev_command import dev
from .init_project import init


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tauri-macos-xcode",
        description="Generate Xcode project for macOS Tauri apps"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Initialize macOS Xcode project")
    init_parser.add_argument("--path", "-p", help="Path to Tauri project root")
    init_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    # dev
    dev_parser = subparsers.add_parser("dev", help="Start dev server and optionally open Xcode")
    dev_parser.add_argument("--open", "-o", action="store_true", help="Open Xcode project")
    dev_parser.add_argument("--path", "-p", help="Path to Tauri project root")
    dev_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "init":
            init(args.path, verbose=args.verbose)
        elif args.command == "dev":
            sys.exit(dev(args.path, open_project=args.open, verbose=args.verbose))
    except (FileNotFoundError, RuntimeError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
