"""Domain models for account admission."""

from bank_intake.models.enums import AdmissionState, RejectionReason
from bank_intake.models.request import AccountRequest, RejectionRecord

__all__ = ["AccountRequest", "AdmissionState", "RejectionReason", "RejectionRecord"]
