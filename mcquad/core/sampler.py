"""Exponential-variate sampler feeding the quadrature integrand."""

from __future__ import annotations

from enum import Enum
from math import inf, log
from typing import Callable, Dict

import numpy as np

Integrand = Callable[[float], float]

# numpy ufuncs tolerate +inf (cos(inf) -> nan) instead of raising like ``math``.
INTEGRANDS: Dict[str, Integrand] = {
    "cos": np.cos,
}


class ZeroDrawPolicy(str, Enum):
    """How the inverse-CDF transform treats a uniform draw of exactly 0.0."""

    SHIFT = "shift"          # -log(1 - u); always finite
    PROPAGATE = "propagate"  # -log(u); u == 0.0 yields +inf


def resolve_integrand(name: str) -> Integrand:
    try:
        return INTEGRANDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown integrand {name!r}; choose from: {', '.join(sorted(INTEGRANDS))}"
        ) from None


def exponential_variate(u: float, policy: ZeroDrawPolicy = ZeroDrawPolicy.SHIFT) -> float:
    """Map a uniform variate on [0, 1) to an Exp(1) variate."""
    if policy is ZeroDrawPolicy.SHIFT:
        return -log(1.0 - u)
    if u <= 0.0:
        return inf
    return -log(u)


class Sampler:
    """
    Draw observations ``g(Y)`` with ``Y ~ Exp(1)``.

    The sampler owns no generator state of its own; it advances the
    ``numpy.random.Generator`` it is given, which must belong to exactly one
    worker and be seeded once before the first draw.
    """

    def __init__(
        self,
        rng: np.random.Generator,
        integrand: Integrand = np.cos,
        *,
        zero_draw: ZeroDrawPolicy = ZeroDrawPolicy.SHIFT,
    ) -> None:
        self.rng = rng
        self.integrand = integrand
        self.zero_draw = ZeroDrawPolicy(zero_draw)

    @classmethod
    def seeded(
        cls,
        seed: int,
        integrand: str = "cos",
        *,
        zero_draw: ZeroDrawPolicy = ZeroDrawPolicy.SHIFT,
    ) -> "Sampler":
        return cls(np.random.default_rng(seed), resolve_integrand(integrand), zero_draw=zero_draw)

    def draw(self) -> float:
        u = float(self.rng.random())
        y = exponential_variate(u, self.zero_draw)
        return float(self.integrand(y))


__all__ = [
    "INTEGRANDS",
    "Integrand",
    "Sampler",
    "ZeroDrawPolicy",
    "exponential_variate",
    "resolve_integrand",
]
