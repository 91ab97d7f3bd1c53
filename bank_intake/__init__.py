"""Checking-account request intake: validation, admission and reporting."""

__version__ = "0.1.0"
