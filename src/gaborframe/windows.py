"""
Window functions on a cyclic domain.

Windows are centred on the first domain point and wrap around the end of
the domain, so the second half of the array holds the negative offsets.
"""

import numpy as np
from scipy.special import i0 as bessel_i0
from typing import Optional

from .func import Func, periodic

WINDOW_TYPES = ('gaussian', 'hann', 'kaiser', 'rectangular', 'steep-gaussian')


def cyclic_offsets(length: int) -> np.ndarray:
    """Signed offsets ``[0, 1, ..., -2, -1]`` from the first domain point."""
    half = length // 2
    return periodic(np.arange(length) + half, length) - half


def steep_gaussian(k):
    """``(√2/8)^½ · exp(-(2k)²)``, a window that has decayed to ~1e-7 at k = 2."""
    return (2 ** 0.5 / 8) ** 0.5 * np.exp(-(2.0 * np.asarray(k)) ** 2)


def build_window(
    length: int,
    win_type: str = 'gaussian',
    param: Optional[float] = None,
    start: int = 0,
) -> np.ndarray:
    """
    Return a ``length``-point window.

    Parameters
    ----------
    length : int
        Domain length L
    win_type : str
        'gaussian', 'hann', 'kaiser', 'rectangular' or 'steep-gaussian'
    param : float, optional
        Gaussian time width (default √L), Hann/rectangular support length
        (default L), Kaiser beta (default 8.6); unused by 'steep-gaussian'
    start : int
        First domain point; only 'steep-gaussian' is evaluated on absolute
        domain points

    Returns
    -------
    np.ndarray
        Real window; unit ℓ² norm for every type except 'steep-gaussian'
    """
    if length < 1:
        raise ValueError(f"Window length must be positive, got {length}")
    t = cyclic_offsets(length).astype(np.float64)

    if win_type == 'gaussian':
        width = np.sqrt(length) if param is None else float(param)
        w = np.exp(-np.pi * (t / width) ** 2)
    elif win_type == 'hann':
        support = length if param is None else float(param)
        x = t / support
        w = (0.5 + 0.5 * np.cos(2 * np.pi * x)) * (np.abs(x) < 0.5)
    elif win_type == 'kaiser':
        beta = 8.6 if param is None else float(param)
        x = t / (length / 2)
        w = bessel_i0(beta * np.sqrt(np.clip(1 - x ** 2, 0, None))) / bessel_i0(beta)
    elif win_type == 'rectangular':
        support = length if param is None else int(param)
        w = ((t >= -(support // 2)) & (t < support - support // 2)).astype(np.float64)
    elif win_type == 'steep-gaussian':
        return steep_gaussian(np.arange(start, start + length))
    else:
        raise ValueError(f"Unsupported window type: {win_type}")

    norm = np.linalg.norm(w)
    if norm > 0:
        w = w / norm
    return w


def window_func(domain: range, win_type: str = 'gaussian', param: Optional[float] = None) -> Func:
    """Window sampled over ``domain`` as a ``Func``."""
    return Func(domain, build_window(len(domain), win_type, param, start=domain.start))
