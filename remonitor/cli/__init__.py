"""CLI for remonitor."""
