"""
Frame configuration and numerical defaults.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

from .func import Func
from .elem_func import ElemFunc
from .windows import window_func

DEFAULT_TOLERANCE = 1e-8
# frame operators with cond(S) above this are logged as ill-conditioned
CONDITION_WARNING = 1e8
# Wexler-Raz residuals above this fraction of the tolerance are logged
RESIDUAL_WARNING = 0.01


@dataclass
class FrameConfig:
    """Complete description of a Gabor system on a cyclic domain."""
    length: int
    time_step: int
    freq_step: int
    start: int = 0
    window: str = 'gaussian'
    window_param: Optional[float] = None
    tolerance: float = DEFAULT_TOLERANCE

    @property
    def domain(self) -> range:
        return range(self.start, self.start + self.length)

    def make_window(self) -> Func:
        return window_func(self.domain, self.window, self.window_param)

    def build(self) -> ElemFunc:
        """Construct the elementary family; step validation happens here."""
        return ElemFunc(self.make_window(), self.time_step, self.freq_step)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'FrameConfig':
        return cls(**d)
