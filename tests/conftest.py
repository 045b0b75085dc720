import jax.numpy as jnp
import pytest

from spinjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that switch precision (test_config.py) restore it in their own
    fixture; this guarantees every other test starts from float64.
    """
    set_dtype(jnp.float64)
