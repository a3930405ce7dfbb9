"""
Discrete Gabor analysis and synthesis.

Analysis with a family and synthesis with one of its duals reproduces the
input signal; synthesis with the same family in general does not.
"""

import logging
import numpy as np
from typing import Tuple

from .elem_func import ElemFunc
from .errors import AnalyseMismatch, SynthesizeMismatch
from .func import Func, periodic

log = logging.getLogger(__name__)


class Lattice:
    """M×N array of Gabor coefficients, indexed ``c(m, n)`` from (0, 0)."""

    def __init__(self, values: np.ndarray):
        values = np.array(values, dtype=np.complex128)
        if values.ndim != 2:
            raise ValueError(f"Lattice needs a 2-D array, got shape {values.shape}")
        values.flags.writeable = False
        self.values = values

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    def __call__(self, m: int, n: int) -> complex:
        M, N = self.shape
        return complex(self.values[periodic(m, M), periodic(n, N)])

    def __repr__(self) -> str:
        return f"Lattice(shape={self.shape})"


def analyse(psi_g: ElemFunc, x: Func) -> Lattice:
    """
    Forward transform: ``c(m, n) = Σ_k conj(ψg(m, n)(k)) · x(k)``.
    """
    if x.domain != psi_g.func.domain:
        raise AnalyseMismatch(x.domain, psi_g.func.domain)
    atoms = psi_g.atoms()
    coeffs = atoms.conj() @ x.values
    log.debug("Analysed signal of length %d into %s lattice", len(x), coeffs.shape)
    return Lattice(coeffs)


def synthesize(psi_g: ElemFunc, c: Lattice) -> Func:
    """
    Inverse transform: ``x(k) = Σ_{m,n} c(m, n) · ψg(m, n)(k)``.
    """
    M, N, _ = psi_g.dimensions()
    if (M, N) != c.shape:
        raise SynthesizeMismatch(c.shape, (M, N))
    values = np.tensordot(c.values, psi_g.atoms(), axes=([0, 1], [0, 1]))
    return Func(psi_g.func.domain, values)
