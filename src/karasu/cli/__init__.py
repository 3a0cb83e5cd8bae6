"""Command line interface for :mod:`karasu`."""
