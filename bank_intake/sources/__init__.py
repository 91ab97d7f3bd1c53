"""Request sources."""

from bank_intake.sources.requests import RequestFileSource, read_requests, write_requests

__all__ = ["RequestFileSource", "read_requests", "write_requests"]
