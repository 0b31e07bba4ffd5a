"""Helper utilities: console output, settings, license and naming."""
