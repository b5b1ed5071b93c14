import pytest

from minim.interpreter import default_env


# Every test gets its own root frame so definitions never leak between tests.
@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return default_env()
