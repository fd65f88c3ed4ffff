"""
One-dimensional diffusion processes.

Each process defines drift μ(t, x) and diffusion σ(t, x) for the Itô SDE:
    dx(t) = μ(t, x(t)) dt + σ(t, x(t)) dz(t)

The base class supplies Euler-Maruyama approximations of the conditional
mean and variance over a step Δt. Processes whose moments are known in
closed form override them.
"""

from __future__ import annotations

import logging
import numpy as np
from abc import ABC, abstractmethod
from typing import Callable, Union

logger = logging.getLogger(__name__)

Time = float
Rate = float
Value = Union[float, np.ndarray]


class DiffusionProcess(ABC):
    """
    Base class for one-dimensional diffusion processes.

    Subclasses must implement ``drift`` and ``diffusion``. ``expectation``
    and ``variance`` default to a single Euler step evaluated at the left
    endpoint (t0, x0) and may be overridden with exact formulas.

    Parameters
    ----------
    x0 : float
        Initial value x(0). Fixed for the lifetime of the instance.
    """

    def __init__(self, x0: float):
        self._x0 = x0
        logger.debug("Created %s with x0=%r", type(self).__name__, x0)

    @property
    def x0(self) -> float:
        """Initial value x(0)."""
        return self._x0

    @abstractmethod
    def drift(self, t: Time, x: Value) -> Value:
        """Drift coefficient μ(t, x)."""
        ...

    @abstractmethod
    def diffusion(self, t: Time, x: Value) -> Value:
        """Diffusion coefficient σ(t, x)."""
        ...

    def expectation(self, t0: Time, x0: Value, dt: Time) -> Value:
        """
        E[x(t0 + Δt) | x(t0) = x0].

        Euler approximation: x0 + μ(t0, x0) Δt.
        """
        return x0 + self.drift(t0, x0) * dt

    def variance(self, t0: Time, x0: Value, dt: Time) -> Value:
        """
        Var[x(t0 + Δt) | x(t0) = x0].

        Euler approximation: σ(t0, x0)² Δt. The sign follows Δt; negative
        steps are not clamped.
        """
        sigma = self.diffusion(t0, x0)
        return sigma * sigma * dt


class BlackScholesProcess(DiffusionProcess):
    """
    Black-Scholes log-price dynamics:  dx = (r - σ²/2) dt + σ dz

    Both coefficients are constant, so the inherited Euler moments are exact.
    """

    def __init__(self, rate: Rate, volatility: float, s0: float = 0.0):
        self.rate = rate
        self.volatility = volatility
        super().__init__(s0)

    def drift(self, t: Time, x: Value) -> Value:
        return self.rate - 0.5 * self.volatility * self.volatility

    def diffusion(self, t: Time, x: Value) -> Value:
        return self.volatility


class OrnsteinUhlenbeckProcess(DiffusionProcess):
    """
    Ornstein-Uhlenbeck (mean-reverting):  dx = θ(μ - x) dt + σ dz

    Conditional moments are Gaussian with closed forms:
        E   = x0 + (μ - x0)(1 - e^{-θΔt})
        Var = σ²/(2θ) (1 - e^{-2θΔt})

    With θ = 0 the process is driftless Brownian motion and the Euler
    defaults are already exact.
    """

    def __init__(self, theta: float = 1.0, mu: float = 0.0, sigma: float = 0.3, x0: float = 0.0):
        self.theta = theta
        self.mu = mu
        self.sigma = sigma
        super().__init__(x0)

    def drift(self, t: Time, x: Value) -> Value:
        return self.theta * (self.mu - x)

    def diffusion(self, t: Time, x: Value) -> Value:
        return self.sigma

    def expectation(self, t0: Time, x0: Value, dt: Time) -> Value:
        if self.theta == 0:
            return super().expectation(t0, x0, dt)
        # expm1 keeps dt = 0 exact
        return x0 - (self.mu - x0) * np.expm1(-self.theta * dt)

    def variance(self, t0: Time, x0: Value, dt: Time) -> Value:
        if self.theta == 0:
            return super().variance(t0, x0, dt)
        return -self.sigma**2 * np.expm1(-2.0 * self.theta * dt) / (2.0 * self.theta)


class CustomDiffusion(DiffusionProcess):
    """
    User-defined process with arbitrary drift and diffusion functions.

    ```python
    process = CustomDiffusion(
        drift_fn=lambda t, x: -0.5 * x,
        diffusion_fn=lambda t, x: 0.3,
        x0=1.0,
    )
    ```
    """

    def __init__(
        self,
        drift_fn: Callable[[Time, Value], Value],
        diffusion_fn: Callable[[Time, Value], Value],
        x0: float = 0.0,
    ):
        if not callable(drift_fn):
            raise TypeError(f"drift_fn must be callable, got {type(drift_fn).__name__}")
        if not callable(diffusion_fn):
            raise TypeError(f"diffusion_fn must be callable, got {type(diffusion_fn).__name__}")
        self._drift_fn = drift_fn
        self._diffusion_fn = diffusion_fn
        super().__init__(x0)

    def drift(self, t: Time, x: Value) -> Value:
        return self._drift_fn(t, x)

    def diffusion(self, t: Time, x: Value) -> Value:
        return self._diffusion_fn(t, x)
