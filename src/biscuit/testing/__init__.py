"""Test utilities for biscuit applications.

    from biscuit.testing import TestClient, cookie_value
"""

from biscuit.testing.assertions import cookie_header, cookie_value
from biscuit.testing.client import TestClient

__all__ = [
    "TestClient",
    "cookie_header",
    "cookie_value",
]
