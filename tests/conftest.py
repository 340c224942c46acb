import jax.numpy as jnp
import pytest

from solarplanets.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that change the dtype (e.g. test_config.py) restore it through
    their own fixtures; this keeps every other test on float64 regardless
    of execution order.
    """
    set_dtype(jnp.float64)


@pytest.fixture
def earth_record():
    """Earth elements of the Curtis Example 8.7 table, inclinations negated."""
    return {
        "a_au": 1.00000011, "da_au": -0.00000005,
        "e": 0.01671022, "de": -0.00003804,
        "inc_deg": -0.00005, "dinc_sec": 46.94,
        "raan_deg": -11.26064, "draan_sec": -18228.25,
        "lop_deg": 102.94719, "dlop_sec": 1198.28,
        "ml_deg": 100.46435, "dml_sec": 129597740.63,
    }


@pytest.fixture
def mars_record():
    """Mars elements of the Curtis Example 8.7 table."""
    return {
        "a_au": 1.52366231, "da_au": -0.00007221,
        "e": 0.09341233, "de": 0.00011902,
        "inc_deg": 1.85061, "dinc_sec": -25.47,
        "raan_deg": 49.57854, "draan_sec": -1020.19,
        "lop_deg": 336.04084, "dlop_sec": 1560.78,
        "ml_deg": 355.45332, "dml_sec": 68905103.78,
    }
