"""Bundled data files for gconf-cleaner."""
