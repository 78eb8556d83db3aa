"""Persistence adapters for the user store."""
