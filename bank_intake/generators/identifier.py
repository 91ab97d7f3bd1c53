"""Account identifier generation."""

from __future__ import annotations

import time

from bank_intake.generators.base import BaseGenerator


class RunCounter:
    """Monotonic per-run counter feeding the identifier suffix."""

    __slots__ = ("_value",)

    def __init__(self, start: int = 0) -> None:
        self._value = start

    def next(self) -> int:
        """Return the current value and advance by one."""
        value = self._value
        self._value += 1
        return value

    @property
    def value(self) -> int:
        return self._value


class IdentifierGenerator(BaseGenerator):
    """Generate 8-digit account identifiers.

    An identifier is six pseudo-random digits followed by the run counter
    modulo 100, zero-padded to two digits. Only the suffix separates
    identifiers drawn in quick succession; the random part may collide.

    Parameters
    ----------
    seed : int | None
        Random seed. Defaults to the wall-clock time in nanoseconds, taken
        once at construction.
    counter : RunCounter | None
        Counter to advance; a fresh one starting at 0 when omitted.
    """

    RANDOM_DIGITS = 6
    SEQUENCE_MODULUS = 100

    def __init__(self, seed: int | None = None, counter: RunCounter | None = None) -> None:
        super().__init__(seed if seed is not None else time.time_ns())
        self.counter = counter if counter is not None else RunCounter()

    def next_id(self) -> str:
        """Return a new identifier and advance the run counter."""
        sequence = self.counter.next() % self.SEQUENCE_MODULUS
        return self.fake.numerify("#" * self.RANDOM_DIGITS) + f"{sequence:02d}"
