"""Identifier and sample-request generators."""

from bank_intake.generators.identifier import IdentifierGenerator, RunCounter
from bank_intake.generators.request import RequestGenerator

__all__ = ["IdentifierGenerator", "RequestGenerator", "RunCounter"]
