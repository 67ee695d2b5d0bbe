"""Environment-driven defaults for quadrature runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.distributor import RemainderPolicy
from .core.sampler import INTEGRANDS, ZeroDrawPolicy

ENV_INTEGRAND = "MCQUAD_INTEGRAND"
ENV_ZERO_DRAW = "MCQUAD_ZERO_DRAW"
ENV_REMAINDER = "MCQUAD_REMAINDER"


def _choices(name: str) -> str:
    return f"{name} must be one of: {', '.join(sorted(INTEGRANDS))}"


@dataclass
class SimulationSettings:
    """Defaults applied when a CLI option or engine argument is omitted.

    The worker count of a parallel job is the size of the MPI world it is
    launched into (``mpiexec -n W``), so it is not a setting.
    """

    integrand: str = "cos"
    zero_draw: ZeroDrawPolicy = ZeroDrawPolicy.SHIFT
    remainder: RemainderPolicy = RemainderPolicy.DROP

    def __post_init__(self) -> None:
        if self.integrand not in INTEGRANDS:
            raise ValueError(_choices("integrand"))
        self.zero_draw = ZeroDrawPolicy(self.zero_draw)
        self.remainder = RemainderPolicy(self.remainder)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SimulationSettings":
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get(ENV_INTEGRAND):
            integrand = env[ENV_INTEGRAND].strip().lower()
            if integrand not in INTEGRANDS:
                raise ValueError(_choices(ENV_INTEGRAND))
            kwargs["integrand"] = integrand
        if env.get(ENV_ZERO_DRAW):
            try:
                kwargs["zero_draw"] = ZeroDrawPolicy(env[ENV_ZERO_DRAW].strip().lower())
            except ValueError:
                raise ValueError(f"{ENV_ZERO_DRAW} must be 'shift' or 'propagate'") from None
        if env.get(ENV_REMAINDER):
            try:
                kwargs["remainder"] = RemainderPolicy(env[ENV_REMAINDER].strip().lower())
            except ValueError:
                raise ValueError(f"{ENV_REMAINDER} must be 'drop' or 'redistribute'") from None
        return cls(**kwargs)


__all__ = ["SimulationSettings"]
