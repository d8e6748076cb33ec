"""Command-line interface for VOTER REGISTRY."""
