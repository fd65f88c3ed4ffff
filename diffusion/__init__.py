"""
Diffusion — one-dimensional diffusion process models.

Abstract drift/diffusion contract with Euler-Maruyama conditional moments,
plus Black-Scholes, Ornstein-Uhlenbeck and user-defined processes.
"""

from .processes import (
    DiffusionProcess,
    BlackScholesProcess,
    OrnsteinUhlenbeckProcess,
    CustomDiffusion,
)

__all__ = [
    "DiffusionProcess",
    "BlackScholesProcess",
    "OrnsteinUhlenbeckProcess",
    "CustomDiffusion",
]

__version__ = "1.0.0"
