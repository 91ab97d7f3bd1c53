"""Output sinks for audit trails, rejections and account tables."""

from bank_intake.sinks.audit_log import AuditLog
from bank_intake.sinks.console import ConsoleSink
from bank_intake.sinks.json_file import JsonFileSink
from bank_intake.sinks.rejection_file import RejectionFileSink
from bank_intake.sinks.table import TableFileSink

__all__ = ["AuditLog", "ConsoleSink", "JsonFileSink", "RejectionFileSink", "TableFileSink"]
