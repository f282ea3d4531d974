"""
LicenseHub settings package.

Pick one module with DJANGO_SETTINGS_MODULE:
LicenseHub.settings.dev, LicenseHub.settings.test or
LicenseHub.settings.prod. All of them extend base.py.
"""
