"""Route test configuration: disable the rate limiter."""

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _disable_rate_limiter():
    """Turn slowapi off so repeated requests in one test never hit 429."""
    with patch("core.ratelimit.limiter.enabled", False):
        yield
