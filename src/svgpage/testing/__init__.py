"""Test utilities for svgpage applications::

    from svgpage.testing import TestClient
"""

from svgpage.testing.client import TestClient

__all__ = ["TestClient"]
