"""Shared configuration and utilities."""
