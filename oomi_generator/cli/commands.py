#!/usr/bin/env python3
"""oomi CLI - Main Entry Point.

Usage:
    oomi <command> [options]

Commands:
    create-project       Create a WordPress project from the official GitHub repository
    help                 Show this help message
"""

from __future__ import annotations

import sys

import click

from oomi_generator import __version__
from oomi_generator.cli.create_project import create_project_cmd

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

EXIT_CANCELLED = 130

COMMANDS: dict[str, str] = {
    "create-project": "Create a WordPress project from the official GitHub repository",
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print(f"📦 oomi {__version__}")
    for cmd, description in COMMANDS.items():
        print(f"  {cmd:20} - {description}")
    print("\n🧩 Options for create-project:")
    print("  --name NAME          Project folder name (prompted when omitted)")
    print("  --theme URL          Theme git repository (repeatable)")
    print("  --plugin URL         Plugin git repository (repeatable)")
    print("  --[no-]gitignore     Write a tailored .gitignore (prompted when omitted)")
    print("  --no-input           Never prompt")
    print("\n🔑 License: set OOMI_KEY or add a .oomi-license file in the current directory")


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="oomi")
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Create WordPress projects from the official GitHub repository."""
    if ctx.invoked_subcommand is None:
        print_help()
    return 0


@click.command(name="help", help="Show help message")
def _help_cmd() -> int:
    print_help()
    return 0


_click_cli.add_command(create_project_cmd)
_click_cli.add_command(_help_cmd)


def main() -> int:
    """Main CLI entry point."""
    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="oomi",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
