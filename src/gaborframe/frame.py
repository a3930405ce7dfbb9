"""
Frame operator, canonical dual and biorthogonality checks.

``operator`` sums the outer products of every lattice atom.  By default
this is the Hermitian frame operator ``S = Σ v vᴴ``; ``conjugate=False``
gives the plain-transpose sum ``Σ v vᵀ``, which agrees with ``S`` only for
real-valued families.
"""

import logging
import numpy as np
from scipy import linalg

from .config import CONDITION_WARNING
from .elem_func import ElemFunc
from .errors import FunctionsDoNotMatchError, SingularOperatorError

log = logging.getLogger(__name__)


def _atom_rows(psi_g: ElemFunc) -> np.ndarray:
    """Atoms flattened m-major into an ``(M*N, L)`` array."""
    M, N, L = psi_g.dimensions()
    return psi_g.atoms().reshape(M * N, L)


def operator(psi_g: ElemFunc, conjugate: bool = True) -> np.ndarray:
    """
    Assemble the L×L frame operator of ``psi_g``.

    Parameters
    ----------
    psi_g : ElemFunc
        Elementary family
    conjugate : bool
        Use ``v vᴴ`` (True) or the plain transpose ``v vᵀ`` (False)

    Returns
    -------
    np.ndarray
        Complex matrix of shape ``(L, L)``
    """
    V = _atom_rows(psi_g)
    # V.T @ W sums the outer products of matching rows
    S = V.T @ (V.conj() if conjugate else V)
    log.debug("Frame operator: %d atoms, shape %s, conjugate=%s",
              V.shape[0], S.shape, conjugate)
    return S


def net_delta(A: np.ndarray, B: np.ndarray) -> float:
    """Sum of absolute entrywise differences."""
    return float(np.sum(np.abs(np.asarray(A) - np.asarray(B))))


def biorthogonal(psi_g: ElemFunc, psi_gamma: ElemFunc) -> float:
    """
    Deviation of ``Σ g_mn γ_mnᴴ`` from the L×L identity.

    Zero (up to rounding) means ``psi_gamma`` is a dual family of ``psi_g``.
    """
    if psi_g.dimensions() != psi_gamma.dimensions():
        raise FunctionsDoNotMatchError(psi_g.dimensions(), psi_gamma.dimensions())
    L = psi_g.dimensions()[2]
    out_prod = _atom_rows(psi_g).T @ _atom_rows(psi_gamma).conj()
    return net_delta(np.eye(L, dtype=np.complex128), out_prod)


def canonical_dual(psi_g: ElemFunc, conjugate: bool = True) -> ElemFunc:
    """Dual family generated by ``γ = S⁻¹ g``."""
    S = operator(psi_g, conjugate=conjugate)
    L = S.shape[0]

    # cond is inf for an exactly singular S
    cond = np.linalg.cond(S)
    if not cond <= 1 / (L * np.finfo(np.float64).eps):
        raise SingularOperatorError(f"Frame operator is numerically singular (cond={cond:.3e})")
    try:
        S_inv = linalg.inv(S)
    except linalg.LinAlgError as e:
        raise SingularOperatorError(f"Frame operator is singular: {e}") from e

    if cond > CONDITION_WARNING:
        log.warning("Frame operator is ill-conditioned (cond=%.3e)", cond)

    gamma = psi_g.func.transform(S_inv)
    return ElemFunc(gamma, psi_g)


def frame(psi_g: ElemFunc, conjugate: bool = True) -> float:
    """Biorthogonality deviation between ``psi_g`` and its operator-derived dual."""
    delta = biorthogonal(psi_g, canonical_dual(psi_g, conjugate=conjugate))
    log.debug("Frame deviation: %.3e", delta)
    return delta
