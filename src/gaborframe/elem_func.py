"""
Elementary function families: all lattice shift-modulations of one window.
"""

import logging
import numbers
import numpy as np
from typing import Tuple, Union

from .errors import InvalidStepError
from .func import Func, shift_modulate


class ElemFunc:
    """
    Family ``{ψ(m·a, n·b, g)}`` for window ``g``, time step ``a``, frequency step ``b``.

    Both steps must be positive divisors of the domain length ``L``; the
    lattice then has ``M = L/a`` shifts and ``N = L/b`` modulations.

    ``ElemFunc(func, other)`` reuses the steps of another family and
    re-validates them against ``func``'s domain.
    """

    def __init__(self, func: Func, time_step: Union[int, "ElemFunc"], freq_step: int = None):
        if isinstance(time_step, ElemFunc):
            if freq_step is not None:
                raise TypeError("freq_step must be omitted when copying steps from an ElemFunc")
            time_step, freq_step = time_step.time_step, time_step.freq_step
        elif freq_step is None:
            raise TypeError("ElemFunc requires freq_step")

        L = len(func)
        for step in (time_step, freq_step):
            if isinstance(step, bool) or not isinstance(step, numbers.Integral):
                raise InvalidStepError(L, time_step, freq_step)
        if time_step <= 0 or freq_step <= 0 or L % time_step != 0 or L % freq_step != 0:
            raise InvalidStepError(L, time_step, freq_step)

        self.func = func
        self.time_step = int(time_step)
        self.freq_step = int(freq_step)
        self.log = logging.getLogger(__name__)
        self.log.debug("ElemFunc: L=%d, a=%d, b=%d, lattice %dx%d",
                       L, self.time_step, self.freq_step,
                       L // self.time_step, L // self.freq_step)

    def dimensions(self) -> Tuple[int, int, int]:
        """Return ``(M, N, L)``."""
        L = len(self.func)
        return L // self.time_step, L // self.freq_step, L

    def __call__(self, m: int, n: int) -> Func:
        return shift_modulate(m * self.time_step, n * self.freq_step, self.func)

    def atoms(self) -> np.ndarray:
        """
        Sample every family member on the lattice.

        Returns
        -------
        np.ndarray
            Complex array of shape ``(M, N, L)``; ``atoms[m, n]`` holds
            the values of ``self(m, n)``.
        """
        M, N, L = self.dimensions()
        out = np.empty((M, N, L), dtype=np.complex128)
        for m in range(M):
            for n in range(N):
                out[m, n] = self(m, n).values
        return out

    def __repr__(self) -> str:
        return (f"ElemFunc(domain={self.func.domain!r}, time_step={self.time_step},"
                f" freq_step={self.freq_step})")


def dimensions(psi_g: ElemFunc) -> Tuple[int, int, int]:
    return psi_g.dimensions()
