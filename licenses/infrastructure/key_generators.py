"""
License key generator wiring.

The generator class is configured by the LICENSE_KEY_GENERATOR setting
as a dotted path.
"""

from django.conf import settings
from django.utils.module_loading import import_string

from licenses.domain.services import LicenseKeyGenerator


def load_license_key_generator() -> LicenseKeyGenerator:
    """
    Instantiate the configured license key generator.

    Returns:
        LicenseKeyGenerator instance

    Raises:
        ImportError: If the dotted path cannot be imported
        TypeError: If the class is not a LicenseKeyGenerator
    """
    generator_class = import_string(settings.LICENSE_KEY_GENERATOR)
    if not issubclass(generator_class, LicenseKeyGenerator):
        raise TypeError(f"{settings.LICENSE_KEY_GENERATOR} is not a LicenseKeyGenerator")
    return generator_class()
