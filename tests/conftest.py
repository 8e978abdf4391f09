import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from healpix_alm.alm import Alm  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(20241019)


@pytest.fixture
def random_alm(rng):
    """
    Factory for coefficient sets filled with Gaussian complex values.

    The m = 0 entries are made real, as they are for a real-valued field.
    """

    def _make(lmax: int, mmax: int | None = None) -> Alm:
        alm = Alm(lmax, mmax)
        n_alm = len(alm)
        values = rng.normal(size=n_alm) + 1j * rng.normal(size=n_alm)
        _, m = alm.lm
        values[m == 0] = values[m == 0].real
        alm.values = values
        return alm

    return _make
