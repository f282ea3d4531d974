"""
Value objects for the domain.

Value objects are immutable and compared by value.
"""
from enum import Enum

from core.domain.exceptions import UnsupportedActionError


class LicenseStatus(Enum):
    """License status value object."""

    VALID = "valid"
    SUSPENDED = "suspended"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value

    @property
    def is_terminal(self) -> bool:
        """Cancelled licenses never change again."""
        return self is LicenseStatus.CANCELLED


class LifecycleAction(Enum):
    """Lifecycle action a brand can apply to a license."""

    RENEW = "renew"
    SUSPEND = "suspend"
    RESUME = "resume"
    CANCEL = "cancel"

    def __str__(self) -> str:
        """Return action as string."""
        return self.value

    @classmethod
    def parse(cls, value) -> "LifecycleAction":
        """
        Parse an action name.

        Args:
            value: Action name or LifecycleAction

        Returns:
            LifecycleAction member

        Raises:
            UnsupportedActionError: If the name is not a known action
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedActionError(str(value)) from exc
