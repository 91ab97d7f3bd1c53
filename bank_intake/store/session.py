"""Batch session: the run state shared by one intake run."""

from dataclasses import dataclass, field, replace

from bank_intake.config import MAX_ACCOUNTS, IntakeConfig
from bank_intake.exceptions import LedgerFullError, RejectionCollectionFullError
from bank_intake.generators.identifier import IdentifierGenerator, RunCounter
from bank_intake.logging import get_logger
from bank_intake.models.account import BankAccount
from bank_intake.models.request import RejectionRecord
from bank_intake.store.bounded import BoundedStore

logger = get_logger(__name__)


@dataclass
class BatchSession:
    """Caller-owned ledger, rejection collection and identifier generator.

    The ledger and the rejection collection share the same capacity but
    fill independently.
    """

    capacity: int = MAX_ACCOUNTS
    identifiers: IdentifierGenerator = field(default_factory=IdentifierGenerator)
    accounts: BoundedStore[BankAccount] = field(init=False, repr=False)
    rejections: BoundedStore[RejectionRecord] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.accounts = BoundedStore(self.capacity, LedgerFullError)
        self.rejections = BoundedStore(self.capacity, RejectionCollectionFullError)

    @classmethod
    def from_config(cls, config: IntakeConfig) -> "BatchSession":
        return cls(
            capacity=config.ledger.max_accounts,
            identifiers=IdentifierGenerator(seed=config.seed),
        )

    @property
    def counter(self) -> RunCounter:
        return self.identifiers.counter

    def add_account(self, account: BankAccount) -> BankAccount:
        """Copy ``account`` into the ledger and return the stored copy.

        Raises
        ------
        LedgerFullError
            The ledger has no free slot; nothing is stored.
        """
        stored = replace(account)
        self.accounts.append(stored)
        return stored

    def add_rejection(self, record: RejectionRecord) -> bool:
        """Store a rejection record; return False if the collection is full."""
        try:
            self.rejections.append(record)
        except RejectionCollectionFullError:
            logger.warning(
                "Rejection collection full (%d); not keeping: %s",
                self.rejections.capacity,
                record.line,
            )
            return False
        return True

    def summary(self) -> dict[str, int]:
        """Return summary counts of the session."""
        return {
            "accounts": len(self.accounts),
            "rejections": len(self.rejections),
            "identifiers_issued": self.counter.value,
        }
