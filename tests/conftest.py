import jax.numpy as jnp
import pytest

from orrery.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Golden values and planarity checks are tighter than float32 allows.
    test_config.py overrides this with its own float32 fixture.
    """
    set_dtype(jnp.float64)
