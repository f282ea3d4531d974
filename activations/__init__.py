"""
Activations module - License key activation per instance.

This module handles:
- Activation entity and domain logic
- Idempotent instance activation
"""
