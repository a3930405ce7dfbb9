import numpy as np
import pytest

from gaborframe import Func, ElemFunc, FrameConfig
from gaborframe.windows import steep_gaussian


@pytest.fixture
def legacy_family():
    """L=12, time step 1, frequency step 12 with the steep Gaussian window."""
    domain = range(0, 12)
    g = Func(domain, steep_gaussian(np.arange(12)))
    return ElemFunc(g, 1, 12)


@pytest.fixture
def gaussian_family():
    """Redundant Gaussian frame: L=24, a=b=4, so M=N=6."""
    return FrameConfig(length=24, time_step=4, freq_step=4, window='gaussian').build()


@pytest.fixture
def undersampled_family():
    """L=12, a=b=4: only 9 atoms in a 12-dimensional space."""
    return FrameConfig(length=12, time_step=4, freq_step=4, window='gaussian').build()


@pytest.fixture
def signal():
    rng = np.random.default_rng(1234)
    return Func(range(0, 24), rng.standard_normal(24) + 1j * rng.standard_normal(24))
