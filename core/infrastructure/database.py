"""
Database utilities and transaction management.
"""

import contextlib
from typing import Iterator

from django.db import IntegrityError, transaction

from core.domain.exceptions import DuplicateRecordError


def atomic():
    """
    Context manager for a unit-of-work transaction.

    Usage:
        with atomic():
            # Database operations
            pass
    """
    return transaction.atomic()


@contextlib.contextmanager
def unique_insert(description: str = "record") -> Iterator[None]:
    """
    Run an insert inside a savepoint and report uniqueness conflicts.

    The savepoint is rolled back on conflict so the surrounding
    transaction stays usable.

    Args:
        description: What is being inserted, used in the error message

    Raises:
        DuplicateRecordError: If the insert violates a unique constraint
    """
    try:
        with transaction.atomic():
            yield
    except IntegrityError as exc:
        raise DuplicateRecordError(f"Duplicate {description}") from exc
