"""Tests for BoundedStore and BatchSession."""

from decimal import Decimal

import pytest

from bank_intake.config import IntakeConfig, LedgerConfig
from bank_intake.exceptions import CapacityError, LedgerFullError
from bank_intake.generators.identifier import IdentifierGenerator
from bank_intake.models.account import BankAccount
from bank_intake.models.request import AccountRequest, RejectionRecord
from bank_intake.store.bounded import BoundedStore
from bank_intake.store.session import BatchSession


def make_account(account_id: str = "00000100") -> BankAccount:
    acct = BankAccount()
    acct.set_account_id(account_id)
    acct.set_account("2222333344", "Alan", "Turing", "alan.turing@computing.com", "100.00", "0.00")
    return acct


def make_rejection(i: int = 0) -> RejectionRecord:
    return RejectionRecord(AccountRequest(str(i), "A", "B", "a@b.com"), "Invalid SSN")


class TestBoundedStore:
    """Tests for BoundedStore."""

    def test_empty(self) -> None:
        """Test a new store is empty."""
        store: BoundedStore[int] = BoundedStore(3)

        assert len(store) == 0
        assert store.is_empty
        assert not store.is_full
        assert store.capacity == 3
        assert store.remaining == 3
        assert list(store) == []

    def test_append_preserves_order(self) -> None:
        """Test appends keep insertion order."""
        store: BoundedStore[str] = BoundedStore(3)

        assert store.append("a") == 0
        assert store.append("b") == 1

        assert list(store) == ["a", "b"]
        assert store.at(1) == "b"
        assert store[0] == "a"
        assert store.remaining == 1

    def test_append_beyond_capacity(self) -> None:
        """Test appending to a full store raises and keeps contents."""
        store: BoundedStore[int] = BoundedStore(2)
        store.append(1)
        store.append(2)

        with pytest.raises(CapacityError):
            store.append(3)

        assert len(store) == 2
        assert store.is_full
        assert list(store) == [1, 2]

    def test_custom_full_error(self) -> None:
        """Test the configured error class is raised when full."""
        store: BoundedStore[int] = BoundedStore(1, LedgerFullError)
        store.append(1)

        with pytest.raises(LedgerFullError):
            store.append(2)

    def test_at_unoccupied_slot(self) -> None:
        """Test reading an unoccupied slot raises IndexError."""
        store: BoundedStore[int] = BoundedStore(3)
        store.append(1)

        with pytest.raises(IndexError):
            store.at(1)
        with pytest.raises(IndexError):
            store.at(-1)

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_invalid_capacity(self, capacity: int) -> None:
        """Test non-positive capacities raise ValueError."""
        with pytest.raises(ValueError):
            BoundedStore(capacity)

    def test_repr(self) -> None:
        """Test the store repr."""
        store: BoundedStore[int] = BoundedStore(4)
        store.append(1)
        assert repr(store) == "BoundedStore(size=1, capacity=4)"


class TestBatchSession:
    """Tests for BatchSession."""

    def test_defaults(self, session: BatchSession) -> None:
        """Test default session capacity."""
        assert session.capacity == 200
        assert session.accounts.capacity == 200
        assert session.rejections.capacity == 200
        assert session.counter.value == 0

    def test_add_account_copies_in(self, session: BatchSession) -> None:
        """Test stored accounts are copies."""
        acct = make_account()
        stored = session.add_account(acct)

        acct.reset()

        assert stored is not acct
        assert session.accounts.at(0).first_name == "Alan"
        assert session.accounts.at(0).present_balance == Decimal("100.00")

    def test_ledger_full(self) -> None:
        """Test a full ledger raises LedgerFullError."""
        session = BatchSession(capacity=2, identifiers=IdentifierGenerator(seed=1))
        session.add_account(make_account("00000100"))
        session.add_account(make_account("00000101"))

        with pytest.raises(LedgerFullError):
            session.add_account(make_account("00000102"))

        assert len(session.accounts) == 2
        assert [a.account_id for a in session.accounts] == ["00000100", "00000101"]

    def test_add_rejection(self, session: BatchSession) -> None:
        """Test storing a rejection."""
        assert session.add_rejection(make_rejection()) is True
        assert len(session.rejections) == 1

    def test_add_rejection_when_full(self) -> None:
        """Test a full rejection list returns False."""
        session = BatchSession(capacity=1, identifiers=IdentifierGenerator(seed=1))

        assert session.add_rejection(make_rejection(1)) is True
        assert session.add_rejection(make_rejection(2)) is False
        assert len(session.rejections) == 1
        assert session.rejections.at(0).request.ssn == "1"

    def test_collections_fill_independently(self) -> None:
        """Test the ledger and rejection list have separate capacity."""
        session = BatchSession(capacity=1, identifiers=IdentifierGenerator(seed=1))
        session.add_rejection(make_rejection())

        session.add_account(make_account())
        assert len(session.accounts) == 1

    def test_from_config(self) -> None:
        """Test building a session from config."""
        config = IntakeConfig(ledger=LedgerConfig(max_accounts=5), seed=3)
        session = BatchSession.from_config(config)

        assert session.capacity == 5
        assert session.identifiers.seed == 3

    def test_summary(self, session: BatchSession) -> None:
        """Test the session summary counts."""
        session.identifiers.next_id()
        session.add_account(make_account())
        session.add_rejection(make_rejection())

        assert session.summary() == {"accounts": 1, "rejections": 1, "identifiers_issued": 1}
