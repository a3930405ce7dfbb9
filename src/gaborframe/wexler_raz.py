"""
Minimum-energy dual windows from the Wexler-Raz identity.

A window ``γ`` generates a dual family of ``ψg`` (steps ``a``, ``b``) iff it
satisfies ``<γ, ψ(k·L/b, l·L/a, g)> = (a·b/L)·δ(k)δ(l)`` on the adjoint
lattice.  In the redundant case the system is under-determined and its
minimum-norm solution is the canonical dual ``S⁻¹ g``.  At critical
sampling (``M·N = L``) the adjoint lattice coincides with the primary one.
"""

import logging
import numpy as np
from scipy import linalg

from .config import DEFAULT_TOLERANCE, RESIDUAL_WARNING
from .elem_func import ElemFunc
from .errors import LinearSolveError
from .func import Func

log = logging.getLogger(__name__)


def adjoint(psi_g: ElemFunc) -> ElemFunc:
    """Family on the adjoint lattice: time step ``N``, frequency step ``M``."""
    M, N, _ = psi_g.dimensions()
    return ElemFunc(psi_g.func, N, M)


def wr_system(psi_g: ElemFunc):
    """
    Build the Wexler-Raz system ``G·γ = μ``.

    Returns
    -------
    G : np.ndarray
        Rows ``conj(ψ°(k, l))`` over the adjoint lattice, k-major
    mu : np.ndarray
        ``L/(M·N)`` in the first entry, zero elsewhere
    """
    M, N, L = psi_g.dimensions()
    psi_adj = adjoint(psi_g)
    K, J, _ = psi_adj.dimensions()
    G = psi_adj.atoms().reshape(K * J, L).conj()
    mu = np.zeros(K * J, dtype=np.complex128)
    mu[0] = L / (M * N)
    return G, mu


def wr_bio(psi_g: ElemFunc, tolerance: float = DEFAULT_TOLERANCE) -> ElemFunc:
    """
    Minimum-energy dual family of ``psi_g`` by a direct linear solve.

    Raises
    ------
    LinearSolveError
        If the solver fails or the system is inconsistent, i.e. ``psi_g``
        admits no dual (it is not a frame).
    """
    G, mu = wr_system(psi_g)
    try:
        gamma, _, rank, _ = linalg.lstsq(G, mu)
    except linalg.LinAlgError as e:
        raise LinearSolveError(f"Wexler-Raz solve failed: {e}") from e

    residual = np.linalg.norm(G @ gamma - mu) / np.linalg.norm(mu)
    log.debug("Wexler-Raz system %s, rank %d, relative residual %.3e",
              G.shape, rank, residual)
    if not residual <= tolerance:
        raise LinearSolveError(
            f"Wexler-Raz system is inconsistent (relative residual {residual:.3e}"
            f" > {tolerance:.1e}); the family is not a frame"
        )
    if residual > RESIDUAL_WARNING * tolerance:
        log.warning("Wexler-Raz residual %.3e is close to tolerance %.1e", residual, tolerance)

    return ElemFunc(Func(psi_g.func.domain, gamma), psi_g)
