"""
oomi WordPress project generator

Creates WordPress project folders from the official GitHub release,
with selected themes and plugins cloned into wp-content.
"""

__version__ = "1.0.0"
