"""Sample account-request generator for manual and load runs."""

from __future__ import annotations

import random
from typing import Iterator

from bank_intake.generators.base import BaseGenerator
from bank_intake.models.request import AccountRequest
from bank_intake.validators import valid_name


class RequestGenerator(BaseGenerator):
    """Generate synthetic account-opening requests.

    Valid requests pass every field rule; invalid ones break exactly one
    field (identifier, name or email) so each rejection reason can be
    exercised.
    """

    HOSTS = ("lapc", "computing", "campus", "college", "mailbox", "harbor", "summit")
    DOMAINS = ["com", "edu"]
    DOMAIN_WEIGHTS = [0.70, 0.30]
    INVALID_FIELDS = ("ssn", "name", "email")

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        super().__init__(seed, locale)
        if seed is not None:
            random.seed(seed)

    def generate(self) -> AccountRequest:
        """Generate a single valid request."""
        first = self._name(self.fake.first_name)
        last = self._name(self.fake.last_name)
        return AccountRequest(
            ssn=self.fake.numerify("#" * 10),
            first_name=first,
            last_name=last,
            email=self._email(first, last),
        )

    def generate_invalid(self, field: str | None = None) -> AccountRequest:
        """Generate a request with one broken field.

        Parameters
        ----------
        field : str | None
            ``"ssn"``, ``"name"`` or ``"email"``; random when omitted.
        """
        field = field or random.choice(self.INVALID_FIELDS)
        request = self.generate()

        if field == "ssn":
            length = random.choice([3, 9, 11])
            return AccountRequest(
                self.fake.numerify("#" * length),
                request.first_name,
                request.last_name,
                request.email,
            )
        if field == "name":
            broken = random.choice([request.first_name[0], f"{request.first_name}{random.randint(0, 9)}"])
            return AccountRequest(request.ssn, broken, request.last_name, request.email)
        if field == "email":
            user = request.email.split("@")[0]
            broken = random.choice([f"{user}@{random.choice(self.HOSTS)}.net", f"{user}@abc.com", f"{user}.com"])
            return AccountRequest(request.ssn, request.first_name, request.last_name, broken)
        raise ValueError(f"Unknown field: {field}")

    def generate_batch(self, count: int, invalid_rate: float = 0.1) -> Iterator[AccountRequest]:
        """Generate a mix of valid and invalid requests.

        Parameters
        ----------
        count : int
            Number of requests to generate.
        invalid_rate : float
            Probability that a request has a broken field.

        Yields
        ------
        AccountRequest
            Generated requests.
        """
        for _ in range(count):
            if random.random() < invalid_rate:
                yield self.generate_invalid()
            else:
                yield self.generate()

    def _name(self, source) -> str:
        # Some Faker names carry apostrophes or hyphens
        name = source()
        while not valid_name(name):
            name = source()
        return name

    def _email(self, first: str, last: str) -> str:
        separator = random.choice([".", "_"])
        host = random.choice(self.HOSTS)
        domain = random.choices(self.DOMAINS, weights=self.DOMAIN_WEIGHTS, k=1)[0]
        return f"{first.lower()}{separator}{last.lower()}@{host}.{domain}"
