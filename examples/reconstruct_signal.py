#!/usr/bin/env python3
"""
Example: analyse a chirp with a redundant Gaussian frame and reconstruct it.
"""

import logging

import numpy as np

from gaborframe import Func, FrameConfig, analyse, synthesize, canonical_dual, verify_frame


def main():
    # Setup logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    cfg = FrameConfig(length=96, time_step=8, freq_step=6, window='gaussian')
    psi_g = cfg.build()
    M, N, L = psi_g.dimensions()

    print("Analysing a linear chirp with a Gaussian Gabor frame...")
    print(f"Lattice: {M} shifts x {N} modulations on L={L} (redundancy {M * N / L:.2f})")
    print()

    k = np.arange(L)
    x = Func(cfg.domain, np.exp(1j * np.pi * k ** 2 / (2 * L)))

    coeffs = analyse(psi_g, x)
    x_rec = synthesize(canonical_dual(psi_g), coeffs)

    print("\nReconstruction Results:")
    print("-" * 50)
    print(f"Max error (dual synthesis): {np.max(np.abs(x_rec.values - x.values)):.2e}")
    peak = np.unravel_index(np.argmax(np.abs(coeffs.values)), coeffs.shape)
    print(f"Largest coefficient at lattice point (m, n) = {peak}")

    results = verify_frame(psi_g)
    lower, upper = results['frame_bounds']
    print(f"Frame bounds: A={lower:.4f}, B={upper:.4f} (condition {results['condition_number']:.2f})")
    print(f"Wexler-Raz dual agrees with S^-1 g: {results['duals_agree']}")


if __name__ == '__main__':
    main()
