"""Command line interface for AutoEyes."""
