#!/usr/bin/env python3
"""
Verification tools for Gabor frames and their duals.
"""

import logging
import numpy as np
from scipy import linalg
from typing import Dict, Any

from .config import DEFAULT_TOLERANCE
from .elem_func import ElemFunc
from .errors import GaborError
from .frame import operator, biorthogonal, canonical_dual
from .func import Func
from .transform import analyse, synthesize
from .wexler_raz import wr_bio

log = logging.getLogger(__name__)


def verify_frame(
    psi_g: ElemFunc,
    tolerance: float = DEFAULT_TOLERANCE,
    seed: int = 0,
) -> Dict[str, Any]:
    """
    Verify that an elementary family is a frame and that its duals work.
    
    Parameters
    ----------
    psi_g : ElemFunc
        Elementary family under test
    tolerance : float
        Pass threshold for deviations and residuals
    seed : int
        Seed for the random test signal used in the round trip
        
    Returns
    -------
    dict
        Verification results
    """
    M, N, L = psi_g.dimensions()
    S = operator(psi_g)
    legacy = operator(psi_g, conjugate=False)

    # S is Hermitian by construction; eigvalsh gives the frame bounds
    eigenvalues = linalg.eigvalsh(S)
    lower, upper = float(eigenvalues[0]), float(eigenvalues[-1])
    is_frame = lower > tolerance * max(upper, 1.0)

    results = {
        'dimensions': (M, N, L),
        'redundancy': M * N / L,
        'frame_bounds': (lower, upper),
        'condition_number': upper / lower if lower > 0 else np.inf,
        'is_frame': is_frame,
        'hermitian_error': float(np.max(np.abs(S - S.conj().T))),
        'legacy_hermitian_error': float(np.max(np.abs(legacy - legacy.conj().T))),
        'legacy_operator_error': float(np.max(np.abs(S - legacy))),
    }

    if is_frame:
        psi_gamma = canonical_dual(psi_g)
        delta = biorthogonal(psi_g, psi_gamma)
        results['biorthogonal_deviation'] = delta
        results['biorthogonal_pass'] = delta < tolerance * L

        rng = np.random.default_rng(seed)
        x = Func(psi_g.func.domain, rng.standard_normal(L) + 1j * rng.standard_normal(L))
        x_rec = synthesize(psi_gamma, analyse(psi_g, x))
        results['reconstruction_error'] = float(np.max(np.abs(x_rec.values - x.values)))

        try:
            psi_wr = wr_bio(psi_g, tolerance=tolerance)
        except GaborError as e:
            log.warning("Wexler-Raz dual unavailable: %s", e)
            results['duals_agree'] = False
        else:
            comparison = compare_duals(psi_gamma, psi_wr, tolerance=tolerance)
            results['wr_agreement'] = comparison['max_difference']
            results['duals_agree'] = comparison['match']
    else:
        log.warning("Family is not a frame (lower bound %.3e)", lower)
        results['biorthogonal_pass'] = False
        results['duals_agree'] = False

    log.info("Verification results:")
    for key, value in results.items():
        log.info("  %s: %s", key, value)

    return results


def compare_duals(
    psi_a: ElemFunc,
    psi_b: ElemFunc,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Dict[str, Any]:
    """
    Compare the windows of two dual families.

    Returns
    -------
    dict
        ``max_difference`` between the windows, ``same_lattice`` and ``match``
    """
    same_lattice = psi_a.dimensions() == psi_b.dimensions()
    if len(psi_a.func) == len(psi_b.func):
        diff = float(np.max(np.abs(psi_a.func.values - psi_b.func.values)))
    else:
        diff = np.inf
    return {
        'max_difference': diff,
        'same_lattice': same_lattice,
        'match': same_lattice and diff < tolerance,
    }
