"""Errors, types, configuration and logging shared across numeralsys."""
