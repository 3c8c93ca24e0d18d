"""Logging and performance helpers."""
