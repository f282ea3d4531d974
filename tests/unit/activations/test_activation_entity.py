"""
Unit tests for Activation domain entity.
"""

import uuid
from datetime import datetime, timezone

import pytest

from activations.domain.activation import Activation

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestActivationEntity:
    """Tests for Activation domain entity."""

    def test_create_activation(self):
        """Test creating an activation entity."""
        license_key_id = uuid.uuid4()
        activation = Activation.create(
            license_key_id=license_key_id,
            instance_id="https://site.example",
            activated_at=NOW,
        )

        assert activation.license_key_id == license_key_id
        assert activation.instance_id == "https://site.example"
        assert activation.activated_at == NOW
        assert activation.deactivated_at is None
        assert activation.is_active is True

    def test_deactivated(self):
        """Test an activation with a deactivation time is inactive."""
        activation = Activation(
            id=uuid.uuid4(),
            license_key_id=uuid.uuid4(),
            instance_id="host-1",
            activated_at=NOW,
            deactivated_at=NOW,
        )

        assert activation.is_active is False

    @pytest.mark.parametrize("instance_id", ["", "   "])
    def test_empty_instance(self, instance_id):
        """Test activation with empty instance identifier."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Activation.create(
                license_key_id=uuid.uuid4(), instance_id=instance_id, activated_at=NOW
            )

    def test_instance_too_long(self):
        """Test activation with instance identifier over 255 characters."""
        with pytest.raises(ValueError, match="too long"):
            Activation.create(
                license_key_id=uuid.uuid4(), instance_id="x" * 256, activated_at=NOW
            )
