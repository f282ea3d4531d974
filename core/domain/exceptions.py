"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions. Each carries a
machine-readable code that the API layer maps to a response.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class DuplicateRecordError(Exception):
    """
    Raised by repositories when an insert violates a uniqueness constraint.

    Not a domain exception: services translate it into the idempotent
    outcome or retry, it never reaches a caller.
    """


class NotFoundError(DomainException):
    """Base exception for missing records addressed by id."""

    pass


class BrandNotFoundError(NotFoundError):
    """Raised when a brand is not found."""

    def __init__(self, message: str = "Brand not found"):
        super().__init__(message, code="BRAND_NOT_FOUND")


class LicenseNotFoundError(NotFoundError):
    """Raised when a license is not found."""

    def __init__(self, message: str = "License not found"):
        super().__init__(message, code="LICENSE_NOT_FOUND")


class LicenseKeyNotFoundError(NotFoundError):
    """Raised when a license key addressed by id is not found."""

    def __init__(self, message: str = "License key not found"):
        super().__init__(message, code="LICENSE_KEY_NOT_FOUND")


class InvalidLicenseKeyError(DomainException):
    """Raised when a license key token does not exist."""

    def __init__(self, message: str = "Invalid license key."):
        super().__init__(message, code="INVALID_LICENSE_KEY")


class NoValidLicensesError(DomainException):
    """Raised when a license key has no usable license to activate."""

    def __init__(self, message: str = "No valid licenses available for activation."):
        super().__init__(message, code="NO_VALID_LICENSES")


class ProductNotFoundError(DomainException):
    """Raised when a product code does not exist within the brand."""

    def __init__(self, product_code: str = None):
        message = (
            f"Product '{product_code}' not found for this brand."
            if product_code
            else "Product not found for this brand."
        )
        super().__init__(message, code="PRODUCT_NOT_FOUND")
        self.product_code = product_code


class TenantIsolationError(DomainException):
    """Base exception for operations that cross a brand boundary."""

    pass


class CrossTenantKeyError(TenantIsolationError):
    """Raised when provisioning onto a license key owned by another brand."""

    def __init__(self, message: str = "License key does not belong to this brand."):
        super().__init__(message, code="CROSS_TENANT_KEY")


class CrossTenantAccessError(TenantIsolationError):
    """Raised when a brand addresses a license it does not own."""

    def __init__(self, message: str = "License does not belong to this brand."):
        super().__init__(message, code="CROSS_TENANT_ACCESS")


class LicenseLifecycleError(DomainException):
    """Base exception for rejected lifecycle changes."""

    pass


class LicenseImmutableError(LicenseLifecycleError):
    """Raised for any change to a cancelled license."""

    def __init__(self, message: str = "Cancelled licenses cannot be modified."):
        super().__init__(message, code="LICENSE_IMMUTABLE")


class MissingExpiryError(LicenseLifecycleError):
    """Raised when renewing without a new expiry."""

    def __init__(self, message: str = "expires_at is required for renewal"):
        super().__init__(message, code="MISSING_EXPIRY")


class InvalidTransitionError(LicenseLifecycleError):
    """Raised when an action is not allowed from the current status."""

    def __init__(self, action: str, status: str):
        super().__init__(
            f"Cannot {action} a license that is {status}.",
            code="INVALID_TRANSITION",
        )
        self.action = action
        self.status = status


class UnsupportedActionError(LicenseLifecycleError):
    """Raised for an unknown lifecycle action."""

    def __init__(self, action: str):
        super().__init__(f"Unsupported action '{action}'.", code="UNSUPPORTED_ACTION")
        self.action = action
