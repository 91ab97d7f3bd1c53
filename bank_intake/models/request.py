"""Raw account-opening request and rejection record models."""

from dataclasses import dataclass

REJECTION_SEPARATOR = " :: "


@dataclass(frozen=True)
class AccountRequest:
    """One four-field record read from the request source."""

    ssn: str
    first_name: str
    last_name: str
    email: str

    @property
    def raw(self) -> str:
        """Fields joined by single spaces, as they appear in the source."""
        return f"{self.ssn} {self.first_name} {self.last_name} {self.email}"


@dataclass(frozen=True)
class RejectionRecord:
    """A rejected request together with the reason it was turned away."""

    request: AccountRequest
    reason: str

    @property
    def line(self) -> str:
        return f"{self.request.raw}{REJECTION_SEPARATOR}{self.reason}"
