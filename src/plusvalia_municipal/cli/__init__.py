"""Command-line interface for Plusvalía Municipal."""
