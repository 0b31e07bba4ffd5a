"""
CLI module for the oomi project generator.

This module provides the command-line interface, including the main entry
point installed as the ``oomi`` console script.
"""

from .commands import main

__all__ = ["main"]
