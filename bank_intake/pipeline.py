"""Admission pipeline: validate requests and route them to the ledger.

Each request moves through ``RECEIVED -> VALIDATING -> ACCEPTED`` or
``REJECTED(reason)``. Per-request failures never stop a batch; only a
source or sink that cannot be opened ends a run early.
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from bank_intake.config import MAX_OVERDRAFT, BalancePolicy
from bank_intake.exceptions import LedgerFullError, RequestSourceError, SinkError, ValidationError
from bank_intake.logging import get_logger
from bank_intake.models.account import BankAccount
from bank_intake.models.enums import AdmissionState
from bank_intake.models.request import AccountRequest, RejectionRecord
from bank_intake.sinks.audit_log import AuditLog
from bank_intake.sinks.rejection_file import RejectionFileSink
from bank_intake.sources.requests import RequestFileSource
from bank_intake.store.session import BatchSession

logger = get_logger(__name__)


@dataclass(frozen=True)
class AdmissionOutcome:
    """Terminal state of one request."""

    request: AccountRequest
    state: AdmissionState
    account: BankAccount | None = None
    reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.state == AdmissionState.ACCEPTED


@dataclass
class BatchSummary:
    """Aggregate counts for one batch."""

    processed: int = 0
    created: int = 0
    invalid: int = 0

    @property
    def audit_line(self) -> str:
        return f"RUN SUMMARY -> {self}"

    def __str__(self) -> str:
        return f"processed={self.processed} created={self.created} invalid={self.invalid}"


class AdmissionPipeline:
    """Admit account requests into a batch session.

    Parameters
    ----------
    session : BatchSession
        Ledger, rejection collection and identifier generator for the run.
    audit : AuditLog | None
        Receives one line per validation attempt and per batch.
    policy : BalancePolicy | None
        Opening-balance policy; the default policy when omitted.
    max_overdraft : Decimal
        Standard overdraft allowance for non-student accounts.
    rejection_sink : RejectionFileSink | None
        Receives every rejection, including those the session can no
        longer keep in memory.
    """

    def __init__(
        self,
        session: BatchSession,
        audit: AuditLog | None = None,
        policy: BalancePolicy | None = None,
        max_overdraft: Decimal = MAX_OVERDRAFT,
        rejection_sink: RejectionFileSink | None = None,
    ) -> None:
        self.session = session
        self.audit = audit
        self.policy = policy or BalancePolicy()
        self.max_overdraft = max_overdraft
        self.rejection_sink = rejection_sink

    def admit(self, request: AccountRequest) -> AdmissionOutcome:
        """Validate one request and store it as an account or a rejection."""
        logger.debug("%s %s", AdmissionState.RECEIVED.value, request.raw)

        account_id = self.session.identifiers.next_id()
        balances = self.policy.opening_balances(request.email, self.max_overdraft)
        account = BankAccount(max_overdraft=balances.max_overdraft)
        account.set_account_id(account_id)

        logger.debug("%s %s as %s", AdmissionState.VALIDATING.value, request.ssn, account_id)
        try:
            account.set_account(
                request.ssn,
                request.first_name,
                request.last_name,
                request.email,
                balances.present,
                balances.available,
                audit=self.audit,
            )
        except ValidationError as e:
            return self._reject(request, account_id, e.reason.value)

        try:
            stored = self.session.add_account(account)
        except LedgerFullError as e:
            logger.warning(
                "Ledger full (%d); account %s not admitted",
                self.session.capacity,
                account_id,
                extra={"account_id": account_id, "reason": e.reason.value},
            )
            self._audit(f"PUSH FAILED (ledger full) for account {account_id}")
            return self._reject(request, account_id, e.reason.value)

        logger.debug(
            "%s %s",
            AdmissionState.ACCEPTED.value,
            account_id,
            extra={"account_id": account_id, "state": AdmissionState.ACCEPTED.value},
        )
        return AdmissionOutcome(request, AdmissionState.ACCEPTED, account=stored)

    def run(self, requests: Iterable[AccountRequest]) -> BatchSummary:
        """Admit every request from ``requests`` and return the batch counts."""
        summary = BatchSummary()
        for request in requests:
            summary.processed += 1
            if self.admit(request).accepted:
                summary.created += 1
            else:
                summary.invalid += 1

        self._audit(summary.audit_line)
        logger.info("Batch complete: %s", summary, extra=asdict(summary))
        return summary

    def _reject(self, request: AccountRequest, account_id: str, reason: str) -> AdmissionOutcome:
        logger.debug(
            "%s %s: %s",
            AdmissionState.REJECTED.value,
            request.raw,
            reason,
            extra={"account_id": account_id, "state": AdmissionState.REJECTED.value, "reason": reason},
        )
        record = RejectionRecord(request, reason)
        self.session.add_rejection(record)
        if self.rejection_sink is not None:
            self.rejection_sink.write(record)
        return AdmissionOutcome(request, AdmissionState.REJECTED, reason=reason)

    def _audit(self, message: str) -> None:
        if self.audit is not None:
            self.audit.append(message)


def process_request_file(
    session: BatchSession,
    audit: AuditLog,
    input_path: str | Path,
    error_path: str | Path,
    policy: BalancePolicy | None = None,
    max_overdraft: Decimal = MAX_OVERDRAFT,
) -> BatchSummary:
    """Run one batch from a request file, writing rejections to ``error_path``.

    The error file is overwritten for each run. Both files are closed on
    every exit path.

    Raises
    ------
    RequestSourceError
        The request file cannot be opened.
    SinkError
        The error file cannot be opened.
    """
    try:
        with RejectionFileSink(error_path) as sink:
            with RequestFileSource(input_path) as source:
                pipeline = AdmissionPipeline(
                    session,
                    audit=audit,
                    policy=policy,
                    max_overdraft=max_overdraft,
                    rejection_sink=sink,
                )
                return pipeline.run(source)
    except RequestSourceError as e:
        _open_failed(audit, e, input_path)
        raise
    except SinkError as e:
        _open_failed(audit, e, error_path)
        raise


def _open_failed(audit: AuditLog, error: Exception, path: str | Path) -> None:
    logger.error("%s", error, extra={"path": str(path)})
    audit.append(f"ERROR: cannot open {path}")
