"""Console output helpers for the oomi CLI.

Progress lines go to stdout. Warnings and errors go to stderr so that
they stay visible when stdout is redirected.
"""

import os
import sys


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def _paint(msg: str, *codes: str) -> str:
    if os.environ.get("NO_COLOR"):
        return msg
    return f"{''.join(codes)}{msg}{Colors.ENDC}"


def print_header(msg: str) -> None:
    """Print a header message."""
    print(_paint(msg, Colors.HEADER, Colors.BOLD))


def print_info(msg: str) -> None:
    """Print an info message."""
    print(_paint(msg, Colors.OKCYAN))


def print_success(msg: str) -> None:
    """Print a success message."""
    print(_paint(f"✓ {msg}", Colors.OKGREEN))


def print_warning(msg: str) -> None:
    """Print a warning message to stderr."""
    print(_paint(f"⚠️  Warning: {msg}", Colors.YELLOW), file=sys.stderr)


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(_paint(f"❌ Error: {msg}", Colors.RED), file=sys.stderr, flush=True)
