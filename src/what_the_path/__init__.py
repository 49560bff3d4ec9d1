"""Detect the user's shell, find its rc files and edit PATH setup idempotently."""

__version__ = "0.1.0"
