"""
LicenseHub Django project.

Multi-tenant license key service: brands provision license keys for their
customers, end-user products activate and validate them.
"""
