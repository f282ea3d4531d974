"""
Licenses module - License key and License management.

This module handles:
- LicenseKey and License entities and the lifecycle state machine
- Provisioning, lifecycle changes, validation and the customer query
- License key token generation
"""
