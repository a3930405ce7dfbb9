"""
Error taxonomy for Gabor frame computations.

Every error is raised eagerly at the call that violates an invariant;
nothing is coerced and no partial result is returned.
"""

import numpy as np


class GaborError(Exception):
    """Base class for all gaborframe errors."""


class DimensionMismatch(GaborError, ValueError):
    """Func values do not fit the domain, or two families differ in size."""

    def __init__(self, func_size=None, space_size=None, message=None):
        self.func_size = func_size
        self.space_size = space_size
        if message is None:
            message = (f"The dimensions ({func_size}) of the Func values"
                       f" do not match the size ({space_size}) of the space!")
        super().__init__(message)


class FunctionsDoNotMatchError(DimensionMismatch):
    """Two elementary families cannot be compared for biorthogonality."""

    def __init__(self, dims_a=None, dims_b=None):
        self.dims_a = dims_a
        self.dims_b = dims_b
        super().__init__(
            message="Cannot compare functions with different dimensions or"
                    f" domains for biorthogonality: {dims_a} vs {dims_b}"
        )


class SynthesizeMismatch(DimensionMismatch):
    """Coefficient lattice shape disagrees with the family's (M, N)."""

    def __init__(self, coeff_shape=None, lattice_shape=None):
        self.coeff_shape = coeff_shape
        self.lattice_shape = lattice_shape
        super().__init__(
            message=f"Size of coefficients {coeff_shape} does not match"
                    f" elementary function dimensions {lattice_shape}"
        )


class InvalidStepError(GaborError, ValueError):
    """Time or frequency step is non-positive or does not divide the domain."""

    def __init__(self, space_size, time_step, freq_step):
        self.space_size = space_size
        self.time_step = time_step
        self.freq_step = freq_step
        super().__init__(
            f"Unable to fit time-step {time_step} and frequency-step"
            f" of {freq_step} in space of size {space_size}!"
        )


class DomainMismatch(GaborError, ValueError):
    """Two Funcs live on different domains."""


class AnalyseMismatch(DomainMismatch):
    def __init__(self, signal_domain=None, window_domain=None):
        self.signal_domain = signal_domain
        self.window_domain = window_domain
        super().__init__(
            f"Domain {signal_domain} of function being analysed does not match"
            f" elementary function domain {window_domain}"
        )


class SingularOperatorError(GaborError, np.linalg.LinAlgError):
    """The frame operator could not be inverted."""


class LinearSolveError(GaborError, np.linalg.LinAlgError):
    """The Wexler-Raz system has no usable solution."""
