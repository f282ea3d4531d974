import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("licenses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Activation",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "instance_id",
                    models.CharField(help_text="URL, hostname, or machine ID", max_length=255),
                ),
                ("activated_at", models.DateTimeField()),
                ("deactivated_at", models.DateTimeField(blank=True, null=True)),
                (
                    "license_key",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="activations",
                        to="licenses.licensekey",
                    ),
                ),
            ],
            options={
                "db_table": "activations",
                "ordering": ["-activated_at"],
                "unique_together": {("license_key", "instance_id")},
            },
        ),
    ]
