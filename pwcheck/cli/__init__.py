"""CLI module for pwcheck."""
