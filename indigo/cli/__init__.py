"""Command line interface for Indigo."""
