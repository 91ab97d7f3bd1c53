"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from bank_intake.generators.identifier import IdentifierGenerator
from bank_intake.models.request import AccountRequest
from bank_intake.sinks.audit_log import AuditLog
from bank_intake.store.session import BatchSession


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def session(seed: int) -> BatchSession:
    """Fresh batch session with the default capacity."""
    return BatchSession(identifiers=IdentifierGenerator(seed=seed))


@pytest.fixture
def audit(tmp_path: Path) -> AuditLog:
    """Audit log in a temporary directory, already started."""
    log = AuditLog(tmp_path / "bank_log.txt")
    log.start()
    return log


@pytest.fixture
def edu_request() -> AccountRequest:
    """Student request accepted with a negative opening balance."""
    return AccountRequest("1234567890", "Mary", "Lee", "mary_lee@lapc.edu")


@pytest.fixture
def com_request() -> AccountRequest:
    """Request accepted with the default opening balance."""
    return AccountRequest("2222333344", "Alan", "Turing", "alan.turing@computing.com")


@pytest.fixture
def short_ssn_request() -> AccountRequest:
    """Request rejected for its three-digit identifier."""
    return AccountRequest("123", "A", "B", "a@b.com")
