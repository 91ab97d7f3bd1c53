"""Enumeration types for account admission."""

from enum import Enum


class RejectionReason(str, Enum):
    INVALID_SSN = "Invalid SSN"
    INVALID_NAME = "Invalid name"
    INVALID_EMAIL = "Invalid email"
    INVALID_PRESENT_BALANCE = "Invalid present balance"
    INVALID_AVAILABLE_BALANCE = "Invalid available balance"
    LEDGER_FULL = "ledger full"
    REJECTIONS_FULL = "rejection collection full"


class AdmissionState(str, Enum):
    RECEIVED = "RECEIVED"
    VALIDATING = "VALIDATING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
