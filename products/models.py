"""
Model registry for the products app.

Models live in the infrastructure layer; Django discovers them here.
"""

from products.infrastructure.models import Product  # noqa: F401
