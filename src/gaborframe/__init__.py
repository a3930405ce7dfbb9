"""
gaborframe - Discrete Gabor frames on finite cyclic domains.
"""

from .errors import (
    GaborError,
    DimensionMismatch,
    FunctionsDoNotMatchError,
    SynthesizeMismatch,
    InvalidStepError,
    DomainMismatch,
    AnalyseMismatch,
    SingularOperatorError,
    LinearSolveError,
)
from .func import Func, periodic, shift_modulate, psi
from .elem_func import ElemFunc, dimensions
from .frame import operator, net_delta, biorthogonal, canonical_dual, frame
from .transform import Lattice, analyse, synthesize
from .wexler_raz import wr_bio
from .windows import build_window, window_func
from .config import FrameConfig
from .verification import verify_frame, compare_duals

__version__ = "0.1.0"
__all__ = [
    "GaborError",
    "DimensionMismatch",
    "FunctionsDoNotMatchError",
    "SynthesizeMismatch",
    "InvalidStepError",
    "DomainMismatch",
    "AnalyseMismatch",
    "SingularOperatorError",
    "LinearSolveError",
    "Func",
    "periodic",
    "shift_modulate",
    "psi",
    "ElemFunc",
    "dimensions",
    "operator",
    "net_delta",
    "biorthogonal",
    "canonical_dual",
    "frame",
    "Lattice",
    "analyse",
    "synthesize",
    "wr_bio",
    "build_window",
    "window_func",
    "FrameConfig",
    "verify_frame",
    "compare_duals",
]
