"""Command line surface."""
