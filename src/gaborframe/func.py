"""
Complex-valued functions on a finite cyclic domain.

A ``Func`` pairs a contiguous integer domain ``range(start, start + L)`` with
``L`` complex samples.  Indexing wraps periodically, so any integer is a
valid argument.  ``shift_modulate`` is the time-frequency shift that
generates every member of an elementary family.
"""

import numpy as np
from typing import Sequence, Union

from .errors import DimensionMismatch

Scalar = np.complex128


def periodic(k, period: int):
    """Representative of ``k`` in ``[0, period)``; works on ints and arrays."""
    if period <= 0:
        raise ValueError(f"Period must be positive, got {period}")
    return k % period


class Func:
    """
    Immutable complex function over ``domain``.

    Parameters
    ----------
    domain : range
        Contiguous ascending integer range of length ``L >= 1``
    values : sequence of complex
        Exactly ``L`` samples, one per domain position
    """

    # Let ``ndarray @ Func`` fall through to ``Func.__rmatmul__``
    __array_ufunc__ = None

    def __init__(self, domain: range, values: Union[Sequence[complex], np.ndarray]):
        if not isinstance(domain, range) or domain.step != 1:
            raise ValueError(f"Domain must be a contiguous range, got {domain!r}")
        values = np.array(values, dtype=Scalar)
        if values.ndim != 1:
            raise DimensionMismatch(
                message=f"Func values must be one-dimensional, got shape {values.shape}"
            )
        if len(values) != len(domain):
            raise DimensionMismatch(len(values), len(domain))
        if len(domain) == 0:
            raise ValueError("Domain must hold at least one point")
        values.flags.writeable = False
        self.domain = domain
        self.values = values

    @property
    def start(self) -> int:
        return self.domain.start

    def __len__(self) -> int:
        return len(self.domain)

    def __call__(self, k: int) -> complex:
        return complex(self.values[periodic(k - self.start, len(self))])

    def transform(self, matrix: np.ndarray) -> "Func":
        """Return ``Func(domain, matrix @ values)``."""
        return Func(self.domain, np.asarray(matrix) @ self.values)

    def __rmatmul__(self, matrix):
        return self.transform(matrix)

    def __repr__(self) -> str:
        return f"Func(domain={self.domain!r}, values={self.values!r})"


def shift_modulate(p: int, q: int, g: Func) -> Func:
    """
    Shift ``g`` cyclically by ``p`` and modulate by ``q``.

    The sample at position ``i`` moves to ``i + p (mod L)``; the shifted
    sample at domain point ``k`` is then scaled by ``exp(2πi·q·k/L)``.
    """
    L = len(g)
    k = np.arange(g.domain.start, g.domain.stop)
    shifted = np.roll(g.values, p)
    # reduce q*k first so the phase stays accurate for large indices
    phase = np.exp(2j * np.pi * periodic(q * k, L) / L)
    return Func(g.domain, phase * shifted)


psi = shift_modulate
