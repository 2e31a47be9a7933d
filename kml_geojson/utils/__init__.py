"""Shared helpers (identifier strategies)."""
