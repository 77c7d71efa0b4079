"""Bundled data files for disk-cleaner."""
