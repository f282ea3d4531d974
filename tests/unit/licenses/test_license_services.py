"""
Unit tests for License domain services.
"""

import re
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from brands.domain.product import Product
from core.domain.exceptions import (
    CrossTenantAccessError,
    InvalidTransitionError,
    LicenseImmutableError,
    MissingExpiryError,
)
from core.domain.value_objects import LicenseStatus, LifecycleAction
from licenses.domain.license import License
from licenses.domain.license_key import LicenseKey
from licenses.domain.services import (
    TRANSITIONS,
    LicenseStateMachine,
    RandomLicenseKeyGenerator,
    ensure_license_owned_by,
    usable_licenses,
)

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
LATER = NOW + timedelta(hours=1)
RENEWAL = NOW + timedelta(days=365)


def make_license(status=LicenseStatus.VALID, expires_at=None, code="rankmath-pro", key=None):
    product = Product.create(brand_id=uuid.uuid4(), code=code, name=code)
    license = License.create(
        license_key_id=key.id if key else uuid.uuid4(),
        product=product,
        expires_at=expires_at,
        created_at=NOW,
    )
    if key is not None:
        license = License(
            id=license.id,
            license_key_id=license.license_key_id,
            product=product,
            status=license.status,
            expires_at=license.expires_at,
            created_at=license.created_at,
            updated_at=license.updated_at,
            license_key=key,
        )
    if status is not LicenseStatus.VALID:
        license = license.with_status(status, updated_at=NOW)
    return license


class TestRandomLicenseKeyGenerator:
    """Tests for RandomLicenseKeyGenerator."""

    def test_key_format(self):
        """Test generated keys are three groups of four characters."""
        key = RandomLicenseKeyGenerator().generate()
        assert re.fullmatch(r"[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{4}", key)

    def test_keys_differ(self):
        """Test consecutive keys are not repeated."""
        generator = RandomLicenseKeyGenerator()
        keys = {generator.generate() for _ in range(50)}
        assert len(keys) == 50


class TestLicenseStateMachine:
    """Tests for LicenseStateMachine."""

    @pytest.mark.parametrize(
        "status, action, expected",
        [
            (LicenseStatus.VALID, LifecycleAction.RENEW, LicenseStatus.VALID),
            (LicenseStatus.SUSPENDED, LifecycleAction.RENEW, LicenseStatus.VALID),
            (LicenseStatus.VALID, LifecycleAction.SUSPEND, LicenseStatus.SUSPENDED),
            (LicenseStatus.SUSPENDED, LifecycleAction.RESUME, LicenseStatus.VALID),
            (LicenseStatus.VALID, LifecycleAction.CANCEL, LicenseStatus.CANCELLED),
            (LicenseStatus.SUSPENDED, LifecycleAction.CANCEL, LicenseStatus.CANCELLED),
        ],
    )
    def test_allowed_transitions(self, status, action, expected):
        """Test every allowed transition."""
        license = make_license(status=status, expires_at=NOW + timedelta(days=30))

        changed = LicenseStateMachine.apply(license, action, now=LATER, expires_at=RENEWAL)

        assert changed.status == expected
        assert changed.updated_at == LATER
        assert changed.id == license.id

    @pytest.mark.parametrize(
        "status, action",
        [
            (LicenseStatus.SUSPENDED, LifecycleAction.SUSPEND),
            (LicenseStatus.VALID, LifecycleAction.RESUME),
        ],
    )
    def test_rejected_transitions(self, status, action):
        """Test transitions that are not allowed from the current status."""
        license = make_license(status=status)

        with pytest.raises(InvalidTransitionError) as exc_info:
            LicenseStateMachine.apply(license, action, now=LATER)

        assert exc_info.value.action == action.value
        assert exc_info.value.status == status.value

    @pytest.mark.parametrize("action", list(LifecycleAction))
    def test_cancelled_is_immutable(self, action):
        """Test that every action on a cancelled license is rejected."""
        license = make_license(status=LicenseStatus.CANCELLED)

        with pytest.raises(LicenseImmutableError):
            LicenseStateMachine.apply(license, action, now=LATER, expires_at=RENEWAL)

    def test_cancelled_renew_without_expiry_is_immutable(self):
        """Test that the cancelled check runs before the expiry check."""
        license = make_license(status=LicenseStatus.CANCELLED)

        with pytest.raises(LicenseImmutableError):
            LicenseStateMachine.apply(license, LifecycleAction.RENEW, now=LATER)

    def test_renew_requires_expiry(self):
        """Test renewing without a new expiry."""
        license = make_license()

        with pytest.raises(MissingExpiryError):
            LicenseStateMachine.apply(license, LifecycleAction.RENEW, now=LATER)

    def test_renew_sets_expiry(self):
        """Test renewing replaces the expiry."""
        license = make_license(status=LicenseStatus.SUSPENDED, expires_at=NOW)

        renewed = LicenseStateMachine.apply(
            license, LifecycleAction.RENEW, now=LATER, expires_at=RENEWAL
        )

        assert renewed.status == LicenseStatus.VALID
        assert renewed.expires_at == RENEWAL

    def test_non_renew_keeps_expiry(self):
        """Test that an expiry passed with another action is ignored."""
        expires_at = NOW + timedelta(days=30)
        license = make_license(expires_at=expires_at)

        suspended = LicenseStateMachine.apply(
            license, LifecycleAction.SUSPEND, now=LATER, expires_at=RENEWAL
        )

        assert suspended.expires_at == expires_at

    def test_transition_table_covers_non_terminal_statuses(self):
        """Test the table has an entry for each non-terminal status and action."""
        for status in LicenseStatus:
            for action in LifecycleAction:
                assert ((status, action) in TRANSITIONS) is not status.is_terminal


class TestOwnership:
    """Tests for ensure_license_owned_by."""

    def test_owned_license(self):
        """Test a license of the calling brand passes."""
        brand_id = uuid.uuid4()
        key = LicenseKey.create(
            brand_id=brand_id, customer_email="a@example.com", key="K", created_at=NOW
        )

        ensure_license_owned_by(make_license(key=key), brand_id)

    def test_foreign_license(self):
        """Test a license of another brand is rejected."""
        key = LicenseKey.create(
            brand_id=uuid.uuid4(), customer_email="a@example.com", key="K", created_at=NOW
        )

        with pytest.raises(CrossTenantAccessError):
            ensure_license_owned_by(make_license(key=key), uuid.uuid4())

    def test_license_without_key_is_rejected(self):
        """Test ownership cannot be established without the key."""
        with pytest.raises(CrossTenantAccessError):
            ensure_license_owned_by(make_license(), uuid.uuid4())


class TestUsableLicenses:
    """Tests for usable_licenses."""

    def test_filters_and_keeps_order(self):
        """Test only valid, unexpired licenses are kept, in order."""
        perpetual = make_license(code="a")
        expired = make_license(code="b", expires_at=NOW - timedelta(days=1))
        suspended = make_license(code="c", status=LicenseStatus.SUSPENDED)
        future = make_license(code="d", expires_at=NOW + timedelta(days=1))

        usable = usable_licenses([perpetual, expired, suspended, future], NOW)

        assert usable == [perpetual, future]

    def test_empty(self):
        """Test no licenses yields nothing."""
        assert usable_licenses([], NOW) == []
