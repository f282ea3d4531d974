"""
Model registry for the brands app.

Models live in the infrastructure layer; Django discovers them here.
"""

from brands.infrastructure.models import Brand  # noqa: F401
