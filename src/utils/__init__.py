"""Logging, errors and validation helpers."""
