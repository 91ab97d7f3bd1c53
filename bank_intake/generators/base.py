"""Base generator class for Faker-backed generators."""

from __future__ import annotations

from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all generators.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility. Subclasses that also draw from the
    module-level ``random`` seed it themselves.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
    ) -> None:
        self.fake = Faker(locale)
        self.seed = seed
        if seed is not None:
            self.fake.seed_instance(seed)
