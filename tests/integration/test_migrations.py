"""
Integration tests for the schema migrations.
"""

import pytest
from django.core.management import call_command
from django.db import connection


@pytest.mark.django_db
@pytest.mark.integration
class TestMigrations:
    """Tests that the shipped migrations describe the models."""

    def test_no_model_changes_without_migration(self):
        """Test makemigrations finds nothing left to write."""
        call_command("makemigrations", "--check", "--dry-run", verbosity=0)

    def test_license_tables_are_created(self):
        """Test migrate creates every table of the service."""
        tables = set(connection.introspection.table_names())

        assert {"brands", "products", "license_keys", "licenses", "activations"} <= tables
