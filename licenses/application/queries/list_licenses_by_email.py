"""
ListLicensesByEmailQuery.

Query to list every license issued to a customer email, across brands.
"""

from dataclasses import dataclass


@dataclass
class ListLicensesByEmailQuery:
    """Query for licenses by customer email."""

    customer_email: str
