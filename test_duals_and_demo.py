#!/usr/bin/env python3
"""
Tests for the Wexler-Raz dual, windows, configuration, verification and the demo CLI.
"""

import logging

import numpy as np
import pytest
from scipy import linalg

from gaborframe import (
    Func, ElemFunc, FrameConfig, wr_bio, canonical_dual, biorthogonal,
    build_window, window_func, verify_frame, compare_duals,
    LinearSolveError, InvalidStepError,
)
from gaborframe.demo import main
from gaborframe.wexler_raz import adjoint, wr_system
from gaborframe.windows import cyclic_offsets, steep_gaussian, WINDOW_TYPES


# ───────────────────────── Wexler-Raz ────────────────────────── #

def test_wr_dual_matches_canonical_dual(gaussian_family):
    psi_wr = wr_bio(gaussian_family)
    psi_gamma = canonical_dual(gaussian_family)
    np.testing.assert_allclose(psi_wr.func.values, psi_gamma.func.values, atol=1e-8)
    assert (psi_wr.time_step, psi_wr.freq_step) == (4, 4)


def test_wr_dual_is_biorthogonal(gaussian_family):
    assert biorthogonal(gaussian_family, wr_bio(gaussian_family)) < 1e-8


def test_wr_dual_at_critical_sampling(legacy_family):
    psi_wr = wr_bio(legacy_family)
    np.testing.assert_allclose(
        psi_wr.func.values, canonical_dual(legacy_family).func.values, atol=1e-8
    )


@pytest.mark.parametrize("a,b", [(3, 2), (4, 3), (6, 2)])
def test_wr_dual_matches_for_complex_asymmetric_window(a, b):
    rng = np.random.default_rng(42)
    g = Func(range(-5, 19), rng.standard_normal(24) + 1j * rng.standard_normal(24))
    psi_g = ElemFunc(g, a, b)
    psi_wr = wr_bio(psi_g)
    np.testing.assert_allclose(
        psi_wr.func.values, canonical_dual(psi_g).func.values, atol=1e-8
    )
    assert biorthogonal(psi_g, psi_wr) < 1e-8


def test_wr_warns_when_residual_near_tolerance(undersampled_family, caplog):
    G, mu = wr_system(undersampled_family)
    gamma = linalg.lstsq(G, mu)[0]
    residual = np.linalg.norm(G @ gamma - mu) / np.linalg.norm(mu)
    with caplog.at_level(logging.WARNING, logger="gaborframe.wexler_raz"):
        wr_bio(undersampled_family, tolerance=2 * residual)
    assert "close to tolerance" in caplog.text


def test_wr_system_layout(gaussian_family):
    psi_adj = adjoint(gaussian_family)
    assert psi_adj.dimensions() == (4, 4, 24)
    G, mu = wr_system(gaussian_family)
    assert G.shape == (16, 24)
    assert mu[0] == pytest.approx(24 / 36)
    assert np.all(mu[1:] == 0)
    np.testing.assert_allclose(G[0], gaussian_family.func.values.conj())


def test_wr_rejects_undersampled_family(undersampled_family):
    with pytest.raises(LinearSolveError) as exc:
        wr_bio(undersampled_family)
    assert isinstance(exc.value, np.linalg.LinAlgError)


def test_wr_rejects_zero_window():
    psi_zero = ElemFunc(Func(range(0, 8), np.zeros(8)), 2, 2)
    with pytest.raises(LinearSolveError):
        wr_bio(psi_zero)


# ───────────────────────── windows ────────────────────────── #

def test_cyclic_offsets():
    np.testing.assert_array_equal(cyclic_offsets(5), [0, 1, 2, -2, -1])
    np.testing.assert_array_equal(cyclic_offsets(4), [0, 1, -2, -1])


@pytest.mark.parametrize("win_type", [w for w in WINDOW_TYPES if w != 'steep-gaussian'])
def test_windows_have_unit_norm_and_are_symmetric(win_type):
    w = build_window(16, win_type)
    assert np.linalg.norm(w) == pytest.approx(1.0)
    np.testing.assert_allclose(w[1:], w[1:][::-1], atol=1e-12)
    assert w[0] == np.max(w)


def test_steep_gaussian_window():
    w = build_window(12, 'steep-gaussian')
    assert w[0] == pytest.approx((2 ** 0.5 / 8) ** 0.5)
    assert w[1] == pytest.approx(w[0] * np.exp(-4))
    np.testing.assert_allclose(w, steep_gaussian(np.arange(12)))


def test_rectangular_support():
    w = build_window(8, 'rectangular', 3)
    np.testing.assert_array_equal(w > 0, [True, True, False, False, False, False, False, True])


def test_unknown_window():
    with pytest.raises(ValueError):
        build_window(8, 'triangle')


def test_window_func_domain():
    g = window_func(range(3, 15), 'hann', 6)
    assert g.domain == range(3, 15)
    assert g(3) == pytest.approx(np.max(np.abs(g.values)))


# ───────────────────────── configuration ────────────────────────── #

def test_frame_config_round_trip():
    cfg = FrameConfig(length=24, time_step=4, freq_step=6, start=2, window='kaiser', window_param=5.0)
    assert FrameConfig.from_dict(cfg.to_dict()) == cfg
    assert cfg.domain == range(2, 26)
    assert cfg.build().dimensions() == (6, 4, 24)


def test_frame_config_validates_steps():
    with pytest.raises(InvalidStepError):
        FrameConfig(length=12, time_step=5, freq_step=12).build()


# ───────────────────────── verification ────────────────────────── #

def test_verify_frame_passes_for_gaussian(gaussian_family):
    results = verify_frame(gaussian_family)
    assert results['dimensions'] == (6, 6, 24)
    assert results['redundancy'] == pytest.approx(1.5)
    assert results['is_frame']
    assert results['biorthogonal_pass']
    assert results['duals_agree']
    assert results['reconstruction_error'] < 1e-8
    assert results['hermitian_error'] < 1e-12
    assert results['legacy_operator_error'] > 1e-3
    lower, upper = results['frame_bounds']
    assert 0 < lower <= upper


def test_verify_frame_flags_undersampled_family(undersampled_family):
    results = verify_frame(undersampled_family)
    assert not results['is_frame']
    assert not results['biorthogonal_pass']
    assert not results['duals_agree']


def test_compare_duals_on_different_lengths(gaussian_family, legacy_family):
    comparison = compare_duals(gaussian_family, legacy_family)
    assert comparison['max_difference'] == np.inf
    assert not comparison['same_lattice']
    assert not comparison['match']


# ───────────────────────── demo ────────────────────────── #

def test_demo_default_scenario(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Lattice: M=12, N=1, L=12" in out
    assert "Frame operator: 12x12" in out


def test_demo_redundant_gaussian(capsys):
    assert main(['--length', '24', '--time-step', '4', '--freq-step', '4',
                 '--window', 'gaussian']) == 0
    assert "Lattice: M=6, N=6, L=24" in capsys.readouterr().out


def test_demo_reports_invalid_steps():
    assert main(['--length', '12', '--time-step', '5']) == 1
