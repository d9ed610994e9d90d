"""Core infrastructure: paths, settings, logging and theme."""
