"""In-memory stores for one intake run."""

from bank_intake.store.bounded import BoundedStore
from bank_intake.store.session import BatchSession

__all__ = ["BatchSession", "BoundedStore"]
