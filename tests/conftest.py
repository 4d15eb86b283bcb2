import pytest

from diagnostics.middleware import get_rate_limiter


@pytest.fixture(autouse=True)
def _fresh_rate_limiter():
    get_rate_limiter().reset()
    yield
    get_rate_limiter().reset()
