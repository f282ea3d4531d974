"""
Model registry for the activations app.

Models live in the infrastructure layer; Django discovers them here.
"""

from activations.infrastructure.models import Activation  # noqa: F401
