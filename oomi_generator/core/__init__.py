"""Project materialization pipeline."""
